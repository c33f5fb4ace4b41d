# chip8_core/arch/chip8/instructions/alu.py
"""
算術論理演算命令の実装。

フラグを更新する命令では、結果の格納より後にVFを書き込みます。
そのため演算先がVF自身の場合、最終的な値はフラグになります。
"""
from chip8_core.core.errors import DecodeError
from chip8_core.core.snapshot import Operation
from chip8_core.arch.chip8.state import Chip8CpuState
from .base import ExecutionContext, field_x, field_y, field_n, field_kk
from .operations import (
    SetImmediate, AddImmediate, RandomMask,
    Copy, Or, And, Xor, AddWithCarry, SubtractWithBorrow, ShiftRight, ReverseSubtract, ShiftLeft,
)

# --- 6XKK / 7XKK ---
def decode_6xkk(word: int) -> Operation:
    return SetImmediate(field_x(word), field_kk(word))

def execute_ld_imm(state: Chip8CpuState, op: SetImmediate, ctx: ExecutionContext) -> None:
    state.registers[op.x] = op.value

def decode_7xkk(word: int) -> Operation:
    return AddImmediate(field_x(word), field_kk(word))

# @intent:responsibility ADD Vx, byte を実行します。8ビットで折り返し、フラグは変更しません。
def execute_add_imm(state: Chip8CpuState, op: AddImmediate, ctx: ExecutionContext) -> None:
    state.registers[op.x] = (state.registers[op.x] + op.value) & 0xFF

# --- 8XYN ---
# @intent:map 8XYN命令の下位ニブルから命令型へのマッピング。
_ALU_VARIANTS = {
    0x0: Copy,
    0x1: Or,
    0x2: And,
    0x3: Xor,
    0x4: AddWithCarry,
    0x5: SubtractWithBorrow,
    0x6: ShiftRight,
    0x7: ReverseSubtract,
    0xE: ShiftLeft,
}

# @intent:responsibility レジスタ間演算命令をデコードします。未定義の下位ニブルはデコードエラーです。
def decode_8xyn(word: int) -> Operation:
    variant = _ALU_VARIANTS.get(field_n(word))
    if variant is None:
        raise DecodeError(word)
    return variant(field_x(word), field_y(word))

def execute_ld_reg(state: Chip8CpuState, op: Copy, ctx: ExecutionContext) -> None:
    state.registers[op.x] = state.registers[op.y]

def execute_or(state: Chip8CpuState, op: Or, ctx: ExecutionContext) -> None:
    state.registers[op.x] |= state.registers[op.y]

def execute_and(state: Chip8CpuState, op: And, ctx: ExecutionContext) -> None:
    state.registers[op.x] &= state.registers[op.y]

def execute_xor(state: Chip8CpuState, op: Xor, ctx: ExecutionContext) -> None:
    state.registers[op.x] ^= state.registers[op.y]

# @intent:responsibility ADD Vx, Vy を実行し、桁上がりをVFに設定します。
def execute_add_reg(state: Chip8CpuState, op: AddWithCarry, ctx: ExecutionContext) -> None:
    res = state.registers[op.x] + state.registers[op.y]
    state.registers[op.x] = res & 0xFF
    state.vf = 1 if res > 0xFF else 0

# @intent:responsibility SUB Vx, Vy を実行します。借りが発生しなければ(Vx >= Vy) VF=1。
def execute_sub(state: Chip8CpuState, op: SubtractWithBorrow, ctx: ExecutionContext) -> None:
    v1 = state.registers[op.x]
    v2 = state.registers[op.y]
    state.registers[op.x] = (v1 - v2) & 0xFF
    state.vf = 1 if v1 >= v2 else 0

# @intent:responsibility SUBN Vx, Vy を実行します (Vx = Vy - Vx)。借りが発生しなければ(Vy >= Vx) VF=1。
def execute_subn(state: Chip8CpuState, op: ReverseSubtract, ctx: ExecutionContext) -> None:
    v1 = state.registers[op.x]
    v2 = state.registers[op.y]
    state.registers[op.x] = (v2 - v1) & 0xFF
    state.vf = 1 if v2 >= v1 else 0

# @intent:responsibility SHR Vx, Vy を実行します (Vx = Vy >> 1)。VFはシフト前のVyの最下位ビット。
def execute_shr(state: Chip8CpuState, op: ShiftRight, ctx: ExecutionContext) -> None:
    source = state.registers[op.y]
    state.registers[op.x] = source >> 1
    state.vf = source & 0x01

# @intent:responsibility SHL Vx, Vy を実行します (Vx = Vy = Vy << 1)。VFはシフト前のVyの最上位ビット。
def execute_shl(state: Chip8CpuState, op: ShiftLeft, ctx: ExecutionContext) -> None:
    source = state.registers[op.y]
    res = (source << 1) & 0xFF
    state.registers[op.x] = res
    state.registers[op.y] = res
    state.vf = (source >> 7) & 0x01

# --- CXKK ---
def decode_cxkk(word: int) -> Operation:
    return RandomMask(field_x(word), field_kk(word))

# @intent:responsibility RND Vx, byte を実行し、一様乱数バイトとマスクの論理積をVxに格納します。
def execute_rnd(state: Chip8CpuState, op: RandomMask, ctx: ExecutionContext) -> None:
    state.registers[op.x] = ctx.rng.getrandbits(8) & op.value
