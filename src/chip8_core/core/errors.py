# chip8_core/core/errors.py
"""
エミュレーション中に発生する致命的エラーの定義。

デコードエラーと実行エラーの2系統があり、どちらもセッションを継続できないものとして扱います。
呼び出し元が診断できるよう、失敗した命令語とプログラムカウンタを保持します。
"""
from typing import Optional


# @intent:responsibility CHIP-8コアが送出する全ての例外の基底クラスです。
class Chip8Error(Exception):
    def __init__(self, message: str, opcode: Optional[int] = None, pc: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.opcode = opcode
        self.pc = pc

    def __str__(self) -> str:
        text = self.message
        if self.opcode is not None:
            text += f" (opcode 0x{self.opcode:04X}"
            if self.pc is not None:
                text += f" at PC 0x{self.pc:04X}"
            text += ")"
        return text


# @intent:responsibility 既知のエンコーディングに一致しない命令語を表します。
class DecodeError(Chip8Error, ValueError):
    def __init__(self, opcode: int, pc: Optional[int] = None, reason: str = "Invalid instruction"):
        super().__init__(reason, opcode=opcode, pc=pc)

    # @intent:responsibility PC情報を付加した同種の例外を生成します。
    def at(self, pc: int) -> "DecodeError":
        return DecodeError(self.opcode, pc=pc, reason=self.message)


# @intent:responsibility 命令の実行中に発生した致命的エラーの基底クラスです。
class ExecutionError(Chip8Error, RuntimeError):
    def __init__(self, message: str, operation=None, opcode: Optional[int] = None, pc: Optional[int] = None):
        super().__init__(message, opcode=opcode, pc=pc)
        self.operation = operation

    def at(self, opcode: int, pc: int) -> "ExecutionError":
        return type(self)(self.message, operation=self.operation, opcode=opcode, pc=pc)


class StackUnderflowError(ExecutionError):
    """空のスタックからの復帰。"""


class StackOverflowError(ExecutionError):
    """設定されたスタック段数の上限を超えたサブルーチン呼び出し。"""


class UnknownOperationError(ExecutionError):
    """実行関数が登録されていない命令。"""
