# chip8_core/transport/bus.py
"""
Transport Layer (メモリ空間)

このモジュールは、CHIP-8の4KBアドレス空間を抽象化し、読み書きアクセスを
記録する責務を負います。命令から渡されるアドレスは全て12ビットにマスクされます。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union

MEMORY_SIZE = 0x1000
ADDRESS_MASK = 0x0FFF

# @intent:responsibility バスアクセスを記録するためのタイプを定義します。
class BusAccessType(Enum):
    READ = "READ"
    WRITE = "WRITE"

# @intent:responsibility 個々のバスアクセス操作を記録します。
@dataclass(frozen=True) # 不変データ構造
class BusAccess:
    """
    メモリ上で行われた単一のアクセス（読み込みまたは書き込み）を記録するデータクラス。
    """
    address: int
    data: int # 8bit value
    access_type: BusAccessType

# @intent:responsibility 4KBのメモリ空間を保持し、全ての命令由来アクセスを記録します。
# @intent:rationale アクセスをSnapshotに含めることで、1サイクルで何が読み書きされたかを観測可能にします。
class Memory:
    """
    CHIP-8のメインメモリ。
    `read` / `write` はアドレスを12ビットにマスクし、アクセスログに記録します。
    `peek` / `load` / 添字アクセスはログを残さない、インスペクタ・ローダー用の経路です。
    """
    # @intent:responsibility 指定されたサイズのメモリ領域をゼロ初期化します。
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int = MEMORY_SIZE):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("Memory size must be a positive integer.")
        self._memory = bytearray(size)
        self._size = size
        self._mask = ADDRESS_MASK if size == MEMORY_SIZE else None
        self._bus_activity_log: List[BusAccess] = []

    def get_size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    # @intent:responsibility 命令由来のアドレスを有効範囲に正規化します。
    def _resolve(self, address: int) -> int:
        if not isinstance(address, int) or address < 0:
            raise IndexError(f"Invalid memory address: {address!r}")
        if self._mask is not None:
            return address & self._mask
        if address >= self._size:
            raise IndexError(f"Address {address:#06x} out of bounds for memory of size {self._size}.")
        return address

    @staticmethod
    def _check_byte(data: int) -> None:
        if not isinstance(data, int) or not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data!r} is not an 8-bit value.")

    def _log_access(self, address: int, data: int, access_type: BusAccessType) -> None:
        self._bus_activity_log.append(BusAccess(address=address, data=data, access_type=access_type))

    # @intent:responsibility 記録されたアクセスログを取得し、クリアします。
    def get_and_clear_activity_log(self) -> List[BusAccess]:
        """
        現在のアクセスログを返し、内部ログをクリアします。
        """
        log = self._bus_activity_log
        self._bus_activity_log = []
        return log

    # @intent:responsibility 指定されたアドレスから8bitのデータを読み出し、ログに記録します。
    def read(self, address: int) -> int:
        address = self._resolve(address)
        data = self._memory[address]
        self._log_access(address, data, BusAccessType.READ)
        return data

    # @intent:responsibility 指定されたアドレスに8bitのデータを書き込み、ログに記録します。
    def write(self, address: int, data: int) -> None:
        address = self._resolve(address)
        self._check_byte(data)
        self._memory[address] = data
        self._log_access(address, data, BusAccessType.WRITE)

    # @intent:responsibility ログを記録せずに指定されたアドレスからデータを読み出します。
    def peek(self, address: int) -> int:
        return self._memory[self._resolve(address)]

    # @intent:responsibility 連続したバイト列をログなしで書き込みます（フォントやROMの初期ロード用）。
    # @intent:pre-condition 書き込み範囲はメモリ内に収まっている必要があります（折り返しは行いません）。
    def load(self, offset: int, data: Iterable[int]) -> int:
        """
        `offset` から `data` を書き込み、書き込んだバイト数を返します。
        """
        payload = bytes(data)
        if offset < 0 or offset + len(payload) > self._size:
            raise IndexError(
                f"Cannot load {len(payload)} bytes at {offset:#06x}: exceeds memory of size {self._size}."
            )
        self._memory[offset:offset + len(payload)] = payload
        return len(payload)

    # @intent:responsibility メモリ全体をゼロクリアします。
    def clear(self) -> None:
        self._memory[:] = bytes(self._size)
        self._bus_activity_log = []

    def __getitem__(self, key: Union[int, slice]) -> Union[int, bytes]:
        if isinstance(key, slice):
            return bytes(self._memory[key])
        return self.peek(key)

    def __setitem__(self, address: int, data: int) -> None:
        self._check_byte(data)
        self._memory[self._resolve(address)] = data

    def __bytes__(self) -> bytes:
        return bytes(self._memory)
