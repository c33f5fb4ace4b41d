# chip8_core/arch/chip8/instructions/load.py
"""
インデックスレジスタ、タイマー、メモリ転送命令の実装。
"""
import logging

from chip8_core.core.errors import DecodeError
from chip8_core.core.snapshot import Operation
from chip8_core.core.state import AwaitingKey
from chip8_core.arch.chip8.state import Chip8CpuState
from chip8_core.arch.chip8.font import glyph_address
from .base import ExecutionContext, field_x, field_kk, field_nnn
from .operations import (
    SetIndex, ReadDelayTimer, BlockOnKeyPress, SetDelayTimer, SetSoundTimer,
    AddToIndexRegister, UseSprite, ReadRegisterAsBCD, DumpRegisters, FillRegisters,
)

logger = logging.getLogger(__name__)

# --- ANNN ---
def decode_annn(word: int) -> Operation:
    return SetIndex(field_nnn(word))

def execute_ld_i(state: Chip8CpuState, op: SetIndex, ctx: ExecutionContext) -> None:
    state.index = op.address

# --- FXKK ---
# @intent:map FXKK命令の下位バイトから命令型へのマッピング。
_FX_VARIANTS = {
    0x07: ReadDelayTimer,
    0x0A: BlockOnKeyPress,
    0x15: SetDelayTimer,
    0x18: SetSoundTimer,
    0x1E: AddToIndexRegister,
    0x29: UseSprite,
    0x33: ReadRegisterAsBCD,
    0x55: DumpRegisters,
    0x65: FillRegisters,
}

# @intent:responsibility FXKK命令群をデコードします。未定義の下位バイトはデコードエラーです。
def decode_fxkk(word: int) -> Operation:
    variant = _FX_VARIANTS.get(field_kk(word))
    if variant is None:
        raise DecodeError(word)
    return variant(field_x(word))

def execute_ld_vx_dt(state: Chip8CpuState, op: ReadDelayTimer, ctx: ExecutionContext) -> None:
    state.registers[op.x] = state.delay_timer

# @intent:responsibility LD Vx, K を実行し、キー入力待ち状態へ遷移します。
# @intent:rationale コア自身は待機しません。押されたキーの書き込みと状態の解除は入力側が行います。
def execute_ld_vx_k(state: Chip8CpuState, op: BlockOnKeyPress, ctx: ExecutionContext) -> None:
    state.execution_state = AwaitingKey(op.x)
    logger.debug("Waiting for key press into V%X", op.x)

def execute_ld_dt(state: Chip8CpuState, op: SetDelayTimer, ctx: ExecutionContext) -> None:
    state.delay_timer = state.registers[op.x]

def execute_ld_st(state: Chip8CpuState, op: SetSoundTimer, ctx: ExecutionContext) -> None:
    state.sound_timer = state.registers[op.x]

# @intent:responsibility ADD I, Vx を実行します。桁あふれはコンテキストのマスク幅で切り詰めます。
def execute_add_i(state: Chip8CpuState, op: AddToIndexRegister, ctx: ExecutionContext) -> None:
    state.index = (state.index + state.registers[op.x]) & ctx.index_mask

def execute_ld_f(state: Chip8CpuState, op: UseSprite, ctx: ExecutionContext) -> None:
    state.index = glyph_address(state.registers[op.x])

# @intent:responsibility LD B, Vx を実行し、Vxの10進3桁をI, I+1, I+2に格納します。
def execute_ld_b(state: Chip8CpuState, op: ReadRegisterAsBCD, ctx: ExecutionContext) -> None:
    value = state.registers[op.x]
    state.memory.write(state.index, value // 100)
    state.memory.write(state.index + 1, (value // 10) % 10)
    state.memory.write(state.index + 2, value % 10)

# @intent:responsibility LD [I], Vx を実行し、V0..Vxを連続したメモリへ退避します。Iは変更しません。
def execute_ld_mem_regs(state: Chip8CpuState, op: DumpRegisters, ctx: ExecutionContext) -> None:
    for i in range(op.x + 1):
        state.memory.write(state.index + i, state.registers[i])

# @intent:responsibility LD Vx, [I] を実行し、連続したメモリからV0..Vxを復元します。Iは変更しません。
def execute_ld_regs_mem(state: Chip8CpuState, op: FillRegisters, ctx: ExecutionContext) -> None:
    for i in range(op.x + 1):
        state.registers[i] = state.memory.read(state.index + i)
