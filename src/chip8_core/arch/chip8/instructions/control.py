# chip8_core/arch/chip8/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。
"""
from chip8_core.core.errors import DecodeError, StackOverflowError, StackUnderflowError
from chip8_core.core.snapshot import Operation
from chip8_core.arch.chip8.state import Chip8CpuState, KEY_COUNT
from .base import ExecutionContext, field_x, field_y, field_n, field_kk, field_nnn, skip_next
from .operations import (
    ClearDisplay, ReturnFromSubroutine, Call, Jump, CallSubroutine,
    SkipIfEqualImmediate, SkipIfNotEqualImmediate, SkipIfRegistersEqual, SkipIfRegistersNotEqual,
    JumpPlusV0, SkipIfKeyDown, SkipIfKeyUp,
)

# --- 0NNN / 00E0 / 00EE ---
# @intent:responsibility 上位ニブル0の命令群（CLS, RET, SYS）をデコードします。
def decode_0nnn(word: int) -> Operation:
    if word == 0x00E0:
        return ClearDisplay()
    if word == 0x00EE:
        return ReturnFromSubroutine()
    return Call(field_nnn(word))

# @intent:responsibility RET命令を実行し、スタックから戻りアドレスをポップしてPCに設定します。
# @intent:pre-condition スタックが空の場合は致命的エラーとし、PCは変更しません。
def execute_ret(state: Chip8CpuState, op: ReturnFromSubroutine, ctx: ExecutionContext) -> None:
    if not state.stack:
        raise StackUnderflowError("Return from subroutine with an empty stack", operation=op)
    state.pc = state.stack.pop()

# @intent:responsibility SYS / CALL 命令を実行し、戻りアドレスをスタックにプッシュしてからジャンプします。
def execute_call(state: Chip8CpuState, op: Operation, ctx: ExecutionContext) -> None:
    if ctx.stack_limit is not None and len(state.stack) >= ctx.stack_limit:
        raise StackOverflowError(f"Call stack exceeded {ctx.stack_limit} entries", operation=op)
    # state.pc is already pointing to the NEXT instruction
    state.stack.append(state.pc)
    state.pc = op.address

# --- 1NNN ---
def decode_1nnn(word: int) -> Operation:
    return Jump(field_nnn(word))

# @intent:responsibility JP命令を実行し、PCを絶対アドレスに設定します。
def execute_jp(state: Chip8CpuState, op: Jump, ctx: ExecutionContext) -> None:
    state.pc = op.address

# --- 2NNN ---
def decode_2nnn(word: int) -> Operation:
    return CallSubroutine(field_nnn(word))

# --- 3XKK / 4XKK ---
def decode_3xkk(word: int) -> Operation:
    return SkipIfEqualImmediate(field_x(word), field_kk(word))

def execute_se_imm(state: Chip8CpuState, op: SkipIfEqualImmediate, ctx: ExecutionContext) -> None:
    if state.registers[op.x] == op.value:
        skip_next(state)

def decode_4xkk(word: int) -> Operation:
    return SkipIfNotEqualImmediate(field_x(word), field_kk(word))

def execute_sne_imm(state: Chip8CpuState, op: SkipIfNotEqualImmediate, ctx: ExecutionContext) -> None:
    if state.registers[op.x] != op.value:
        skip_next(state)

# --- 5XY0 / 9XY0 ---
# @intent:responsibility レジスタ比較スキップ命令をデコードします。下位ニブルが0以外の場合はデコードエラーです。
def decode_5xy0(word: int) -> Operation:
    if field_n(word) != 0:
        raise DecodeError(word)
    return SkipIfRegistersEqual(field_x(word), field_y(word))

def execute_se_reg(state: Chip8CpuState, op: SkipIfRegistersEqual, ctx: ExecutionContext) -> None:
    if state.registers[op.x] == state.registers[op.y]:
        skip_next(state)

def decode_9xy0(word: int) -> Operation:
    if field_n(word) != 0:
        raise DecodeError(word)
    return SkipIfRegistersNotEqual(field_x(word), field_y(word))

def execute_sne_reg(state: Chip8CpuState, op: SkipIfRegistersNotEqual, ctx: ExecutionContext) -> None:
    if state.registers[op.x] != state.registers[op.y]:
        skip_next(state)

# --- BNNN ---
def decode_bnnn(word: int) -> Operation:
    return JumpPlusV0(field_nnn(word))

# @intent:responsibility JP V0, addr 命令を実行し、V0を加算したアドレスへジャンプします。
def execute_jp_v0(state: Chip8CpuState, op: JumpPlusV0, ctx: ExecutionContext) -> None:
    state.pc = (op.address + state.registers[0]) & 0xFFFF

# --- EX9E / EXA1 ---
# @intent:responsibility キー状態によるスキップ命令をデコードします。下位バイトが9E/A1以外はデコードエラーです。
def decode_exkk(word: int) -> Operation:
    low = field_kk(word)
    if low == 0x9E:
        return SkipIfKeyDown(field_x(word))
    if low == 0xA1:
        return SkipIfKeyUp(field_x(word))
    raise DecodeError(word)

# キー番号は下位4ビットのみ有効
def execute_skp(state: Chip8CpuState, op: SkipIfKeyDown, ctx: ExecutionContext) -> None:
    if state.keys[state.registers[op.x] % KEY_COUNT]:
        skip_next(state)

def execute_sknp(state: Chip8CpuState, op: SkipIfKeyUp, ctx: ExecutionContext) -> None:
    if not state.keys[state.registers[op.x] % KEY_COUNT]:
        skip_next(state)
