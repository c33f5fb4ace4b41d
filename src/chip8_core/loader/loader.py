# chip8_core/loader/loader.py
"""
ROMローダーモジュール。

CHIP-8のROMはヘッダを持たない生のバイナリで、プログラム領域(0x200)へそのまま配置されます。
"""
import warnings
from pathlib import Path
from typing import Union

from chip8_core.transport.bus import Memory
from chip8_core.arch.chip8.state import PROGRAM_START


# @intent:responsibility プログラム領域に収まらないROMを呼び出し元へ通知する警告です。
class RomSizeWarning(UserWarning):
    pass


class RomLoader:
    """
    生のCHIP-8バイナリをメモリにロードするローダー。
    """
    # @intent:responsibility バイト列をプログラム領域へ書き込み、書き込んだバイト数を返します。
    # @intent:rationale 容量超過はコアが拒否するものではなく、警告を出した上で収まる分だけをロードします。
    def load_bytes(self, data: bytes, memory: Memory, offset: int = PROGRAM_START) -> int:
        capacity = memory.get_size() - offset
        if capacity < 0:
            raise ValueError(f"Load offset {offset:#06x} is outside memory of size {memory.get_size()}.")
        if len(data) > capacity:
            warnings.warn(
                f"ROM is {len(data)} bytes but only {capacity} bytes fit from {offset:#05x}; truncating.",
                RomSizeWarning,
                stacklevel=2,
            )
            data = data[:capacity]
        return memory.load(offset, data)

    # @intent:responsibility ファイルからROMを読み込み、メモリにロードします。
    def load_file(self, file_path: Union[str, Path], memory: Memory, offset: int = PROGRAM_START) -> int:
        with open(file_path, 'rb') as f:
            data = f.read()
        return self.load_bytes(data, memory, offset)
