"""
CHIP-8命令セット実装パッケージ。
"""
from typing import Optional

from chip8_core.core.errors import DecodeError, UnknownOperationError
from chip8_core.core.snapshot import Operation
from chip8_core.arch.chip8.state import Chip8CpuState
from .base import ExecutionContext
from .maps import DECODE_MAP, EXECUTE_MAP

_DEFAULT_CONTEXT = ExecutionContext()

# @intent:responsibility 16ビット命令語をデコードします。
# @intent:rationale 純粋関数です。マシン状態には一切触れません。
def decode_opcode(word: int) -> Operation:
    """
    16ビット命令語をデコードし、Operationオブジェクトを返します。
    既知のエンコーディングに一致しない場合は DecodeError を送出します。
    """
    if not isinstance(word, int) or not 0 <= word <= 0xFFFF:
        raise DecodeError(word if isinstance(word, int) else 0, reason=f"Not a 16-bit instruction word: {word!r}")
    return DECODE_MAP[word >> 12](word)

# @intent:responsibility デコードされた命令を実行します。
def execute_instruction(operation: Operation, state: Chip8CpuState,
                        ctx: Optional[ExecutionContext] = None) -> None:
    """
    デコードされた命令を実行し、マシン状態を変更します。
    PCは呼び出し前に次の命令へ進められている前提です。
    """
    executor = EXECUTE_MAP.get(type(operation))
    if executor is None:
        raise UnknownOperationError(f"No executor for {type(operation).__name__}", operation=operation)
    executor(state, operation, ctx if ctx is not None else _DEFAULT_CONTEXT)
