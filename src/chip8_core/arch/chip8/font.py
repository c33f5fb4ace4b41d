# chip8_core/arch/chip8/font.py
"""
16進数字フォント。

0〜Fの各グリフは幅4ピクセル（上位ニブル）、高さ5行で、メモリの低位アドレスに常駐します。
"""
from typing import Tuple

# @intent:constant フォントの配置先アドレスと1グリフあたりのバイト数。
FONT_START_ADDRESS = 0x000
GLYPH_SIZE = 5
GLYPH_COUNT = 16

# @intent:constant 0〜Fのグリフデータ（5バイト x 16文字）。
FONT_SET: Tuple[int, ...] = (
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
)

# @intent:utility_function 指定された16進数字のグリフ先頭アドレスを返します。
def glyph_address(digit: int) -> int:
    """UseSprite命令の参照先。`digit` は 0x0〜0xF を想定します。"""
    return FONT_START_ADDRESS + GLYPH_SIZE * digit
