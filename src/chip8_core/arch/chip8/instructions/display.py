# chip8_core/arch/chip8/instructions/display.py
"""
画面描画命令（CLS, DRW）の実装。
"""
from chip8_core.core.snapshot import Operation
from chip8_core.arch.chip8.state import Chip8CpuState, SCREEN_WIDTH, SCREEN_HEIGHT
from .base import ExecutionContext, field_x, field_y, field_n
from .operations import ClearDisplay, DrawSprite

SPRITE_WIDTH = 8

# --- 00E0 ---
# @intent:responsibility CLS命令を実行し、画面の全ピクセルを消去します。
def execute_cls(state: Chip8CpuState, op: ClearDisplay, ctx: ExecutionContext) -> None:
    state.gfx[:] = bytes(len(state.gfx))

# --- DXYN ---
def decode_dxyn(word: int) -> Operation:
    return DrawSprite(field_x(word), field_y(word), field_n(word))

# @intent:responsibility DRW命令を実行し、Iが指すスプライトを(Vx, Vy)にXOR描画します。
# @intent:rationale 横方向は64ピクセル境界で同じ行の先頭へ折り返します。
#                  縦方向は折り返さず、32行目以降にはみ出した行は描画しません。
def execute_drw(state: Chip8CpuState, op: DrawSprite, ctx: ExecutionContext) -> None:
    origin_x = state.registers[op.x]
    origin_y = state.registers[op.y]
    collision = False

    for row in range(op.height):
        sprite_byte = state.memory.read(state.index + row)
        y = origin_y + row
        if y >= SCREEN_HEIGHT:
            continue
        for bit in range(SPRITE_WIDTH):
            if not sprite_byte & (0x80 >> bit):
                continue
            x = (origin_x + bit) % SCREEN_WIDTH
            cell = y * SCREEN_WIDTH + x
            if state.gfx[cell]:
                collision = True
            state.gfx[cell] ^= 1

    state.vf = 1 if collision else 0
