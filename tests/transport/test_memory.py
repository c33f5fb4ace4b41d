# tests/transport/test_memory.py
"""
chip8_core.transport.busモジュールの単体テスト。
"""
import pytest
from chip8_core.transport.bus import Memory, BusAccess, BusAccessType, MEMORY_SIZE

# @intent:test_suite 4KBメモリ空間の読み書き、アドレスマスク、アクセスログを検証します。

class TestMemory:
    # @intent:test_case_init Memoryクラスが正しいサイズでゼロ初期化されることを検証します。
    def test_memory_init_default_size(self):
        memory = Memory()
        assert memory.get_size() == MEMORY_SIZE
        assert len(memory) == 0x1000
        assert bytes(memory) == bytes(0x1000)

    # @intent:test_case_init 無効なサイズで初期化するとValueErrorが発生することを検証します。
    def test_memory_init_invalid_size(self):
        with pytest.raises(ValueError, match="Memory size must be a positive integer."):
            Memory(0)
        with pytest.raises(ValueError, match="Memory size must be a positive integer."):
            Memory(-1)
        with pytest.raises(ValueError, match="Memory size must be a positive integer."):
            Memory(1.5)

    def test_read_write(self):
        memory = Memory()
        memory.write(0x200, 0x12)
        memory.write(0x201, 0x34)
        assert memory.read(0x200) == 0x12
        assert memory.read(0x201) == 0x34

    # @intent:test_case_mask 4KBメモリでは全てのアドレスが12ビットにマスクされることを検証します。
    def test_addresses_are_masked_to_12_bits(self):
        memory = Memory()
        memory.write(0x1000, 0xAA)
        assert memory.read(0x0000) == 0xAA
        memory.write(0xFFFF, 0xBB)
        assert memory.read(0x0FFF) == 0xBB
        assert memory.peek(0x1FFF) == 0xBB

    def test_small_memory_is_bounds_checked(self):
        memory = Memory(4)
        with pytest.raises(IndexError):
            memory.read(4)
        with pytest.raises(IndexError):
            memory.write(-1, 0x00)

    # @intent:test_case_data 無効なデータ（8bitを超過）を書き込もうとするとValueErrorが発生することを検証します。
    def test_write_invalid_data(self):
        memory = Memory()
        with pytest.raises(ValueError, match="Data 256 is not an 8-bit value."):
            memory.write(0, 0x100)
        with pytest.raises(ValueError, match="Data -1 is not an 8-bit value."):
            memory.write(0, -1)
        with pytest.raises(ValueError):
            memory[0] = 0x100

    # @intent:test_case_logging read/writeはログに記録され、取得時にクリアされることを検証します。
    def test_activity_log(self):
        memory = Memory()
        memory.write(0x1300, 0x55)
        memory.read(0x300)
        log = memory.get_and_clear_activity_log()
        assert log == [
            BusAccess(address=0x300, data=0x55, access_type=BusAccessType.WRITE),
            BusAccess(address=0x300, data=0x55, access_type=BusAccessType.READ),
        ]
        assert memory.get_and_clear_activity_log() == []

    def test_unlogged_access_paths(self):
        memory = Memory()
        memory.load(0x200, [1, 2, 3])
        memory[0x300] = 0x7F
        assert memory.peek(0x201) == 2
        assert memory[0x300] == 0x7F
        assert memory[0x200:0x203] == b"\x01\x02\x03"
        assert memory.get_and_clear_activity_log() == []

    def test_load_returns_count_and_rejects_overflow(self):
        memory = Memory()
        assert memory.load(0xFFE, b"\xAA\xBB") == 2
        with pytest.raises(IndexError):
            memory.load(0xFFF, b"\xAA\xBB")
        assert memory.peek(0xFFF) == 0xBB

    def test_clear(self):
        memory = Memory()
        memory.write(0x10, 0x01)
        memory.clear()
        assert bytes(memory) == bytes(MEMORY_SIZE)
        assert memory.get_and_clear_activity_log() == []
