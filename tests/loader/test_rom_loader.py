# tests/loader/test_rom_loader.py
"""
chip8_core.loader.loaderモジュールの単体テスト。
"""
import pytest

from chip8_core.transport.bus import Memory
from chip8_core.loader.loader import RomLoader, RomSizeWarning

# @intent:test_suite 生バイナリROMのロード機能の検証。

class TestRomLoader:
    @pytest.fixture
    def setup_loader(self):
        return RomLoader(), Memory()

    def test_load_bytes_at_program_start(self, setup_loader):
        loader, memory = setup_loader
        assert loader.load_bytes(b"\x60\x05\x70\x01", memory) == 4
        assert memory[0x200:0x204] == b"\x60\x05\x70\x01"
        assert memory.peek(0x1FF) == 0
        assert memory.get_and_clear_activity_log() == []

    def test_load_bytes_custom_offset(self, setup_loader):
        loader, memory = setup_loader
        loader.load_bytes(b"\xAB", memory, offset=0x600)
        assert memory.peek(0x600) == 0xAB

    # @intent:test_case_overflow プログラム領域を超えるROMは警告の上で切り詰められることを検証します。
    def test_oversized_rom_is_truncated_with_warning(self, setup_loader):
        loader, memory = setup_loader
        data = bytes([0x11]) * (0x1000 - 0x200 + 10)
        with pytest.warns(RomSizeWarning):
            count = loader.load_bytes(data, memory)
        assert count == 0x1000 - 0x200
        assert memory.peek(0xFFF) == 0x11
        # 折り返してフォント領域を上書きしない
        assert memory.peek(0x000) == 0x00

    def test_offset_outside_memory(self, setup_loader):
        loader, memory = setup_loader
        with pytest.raises(ValueError):
            loader.load_bytes(b"\x00", memory, offset=0x1001)

    def test_load_file(self, setup_loader, tmp_path):
        loader, memory = setup_loader
        rom = tmp_path / "test.ch8"
        rom.write_bytes(b"\x00\xE0\x12\x00")
        assert loader.load_file(rom, memory) == 4
        assert memory[0x200:0x204] == b"\x00\xE0\x12\x00"

    def test_load_missing_file(self, setup_loader, tmp_path):
        loader, memory = setup_loader
        with pytest.raises(FileNotFoundError):
            loader.load_file(tmp_path / "missing.ch8", memory)
