# chip8_core/arch/chip8/instructions/operations.py
"""
CHIP-8命令セットの閉じた命令集合。

各命令はOperationを継承した不変のデータクラスで、オペランド（レジスタ番号、
8ビット即値、12ビットアドレス）をフィールドとして保持します。
"""
from dataclasses import dataclass
from typing import List, Tuple, Type

from chip8_core.core.snapshot import Operation


def _reg(index: int) -> str:
    return f"V{index:X}"


def _addr(address: int) -> str:
    return f"${address:03X}"


def _imm(value: int) -> str:
    return f"#${value:02X}"


# @intent:responsibility オペランドの形ごとに共通の基底を定義します。
@dataclass(frozen=True)
class AddressOperation(Operation):
    address: int

    @property
    def operands(self) -> List[str]:
        return [_addr(self.address)]


@dataclass(frozen=True)
class RegisterOperation(Operation):
    x: int

    @property
    def operands(self) -> List[str]:
        return [_reg(self.x)]


@dataclass(frozen=True)
class RegisterImmediateOperation(Operation):
    x: int
    value: int

    @property
    def operands(self) -> List[str]:
        return [_reg(self.x), _imm(self.value)]


@dataclass(frozen=True)
class RegisterPairOperation(Operation):
    x: int
    y: int

    @property
    def operands(self) -> List[str]:
        return [_reg(self.x), _reg(self.y)]


# --- 0x0 ---
@dataclass(frozen=True)
class ClearDisplay(Operation):
    mnemonic = "CLS"


@dataclass(frozen=True)
class ReturnFromSubroutine(Operation):
    mnemonic = "RET"


@dataclass(frozen=True)
class Call(AddressOperation):
    """機械語ルーチン呼び出し (0NNN)。"""
    mnemonic = "SYS"


# --- 0x1 - 0x2 ---
@dataclass(frozen=True)
class Jump(AddressOperation):
    mnemonic = "JP"


@dataclass(frozen=True)
class CallSubroutine(AddressOperation):
    mnemonic = "CALL"


# --- 0x3 - 0x7 ---
@dataclass(frozen=True)
class SkipIfEqualImmediate(RegisterImmediateOperation):
    mnemonic = "SE"


@dataclass(frozen=True)
class SkipIfNotEqualImmediate(RegisterImmediateOperation):
    mnemonic = "SNE"


@dataclass(frozen=True)
class SkipIfRegistersEqual(RegisterPairOperation):
    mnemonic = "SE"


@dataclass(frozen=True)
class SetImmediate(RegisterImmediateOperation):
    mnemonic = "LD"


@dataclass(frozen=True)
class AddImmediate(RegisterImmediateOperation):
    mnemonic = "ADD"


# --- 0x8 (ALU) ---
@dataclass(frozen=True)
class Copy(RegisterPairOperation):
    mnemonic = "LD"


@dataclass(frozen=True)
class Or(RegisterPairOperation):
    mnemonic = "OR"


@dataclass(frozen=True)
class And(RegisterPairOperation):
    mnemonic = "AND"


@dataclass(frozen=True)
class Xor(RegisterPairOperation):
    mnemonic = "XOR"


@dataclass(frozen=True)
class AddWithCarry(RegisterPairOperation):
    mnemonic = "ADD"


@dataclass(frozen=True)
class SubtractWithBorrow(RegisterPairOperation):
    mnemonic = "SUB"


@dataclass(frozen=True)
class ShiftRight(RegisterPairOperation):
    mnemonic = "SHR"


@dataclass(frozen=True)
class ReverseSubtract(RegisterPairOperation):
    mnemonic = "SUBN"


@dataclass(frozen=True)
class ShiftLeft(RegisterPairOperation):
    mnemonic = "SHL"


# --- 0x9 - 0xD ---
@dataclass(frozen=True)
class SkipIfRegistersNotEqual(RegisterPairOperation):
    mnemonic = "SNE"


@dataclass(frozen=True)
class SetIndex(AddressOperation):
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return ["I", _addr(self.address)]


@dataclass(frozen=True)
class JumpPlusV0(AddressOperation):
    mnemonic = "JP"

    @property
    def operands(self) -> List[str]:
        return ["V0", _addr(self.address)]


@dataclass(frozen=True)
class RandomMask(RegisterImmediateOperation):
    mnemonic = "RND"


@dataclass(frozen=True)
class DrawSprite(Operation):
    mnemonic = "DRW"
    x: int
    y: int
    height: int

    @property
    def operands(self) -> List[str]:
        return [_reg(self.x), _reg(self.y), f"#{self.height:X}"]


# --- 0xE ---
@dataclass(frozen=True)
class SkipIfKeyDown(RegisterOperation):
    mnemonic = "SKP"


@dataclass(frozen=True)
class SkipIfKeyUp(RegisterOperation):
    mnemonic = "SKNP"


# --- 0xF ---
@dataclass(frozen=True)
class ReadDelayTimer(RegisterOperation):
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return [_reg(self.x), "DT"]


@dataclass(frozen=True)
class BlockOnKeyPress(RegisterOperation):
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return [_reg(self.x), "K"]


@dataclass(frozen=True)
class SetDelayTimer(RegisterOperation):
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return ["DT", _reg(self.x)]


@dataclass(frozen=True)
class SetSoundTimer(RegisterOperation):
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return ["ST", _reg(self.x)]


@dataclass(frozen=True)
class AddToIndexRegister(RegisterOperation):
    mnemonic = "ADD"

    @property
    def operands(self) -> List[str]:
        return ["I", _reg(self.x)]


@dataclass(frozen=True)
class UseSprite(RegisterOperation):
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return ["F", _reg(self.x)]


@dataclass(frozen=True)
class ReadRegisterAsBCD(RegisterOperation):
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return ["B", _reg(self.x)]


@dataclass(frozen=True)
class DumpRegisters(RegisterOperation):
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return ["[I]", _reg(self.x)]


@dataclass(frozen=True)
class FillRegisters(RegisterOperation):
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return [_reg(self.x), "[I]"]


# @intent:constant デコーダが生成し得る全ての命令型。実行マップはこの集合を網羅しなければなりません。
ALL_OPERATIONS: Tuple[Type[Operation], ...] = (
    ClearDisplay, ReturnFromSubroutine, Call, Jump, CallSubroutine,
    SkipIfEqualImmediate, SkipIfNotEqualImmediate, SkipIfRegistersEqual,
    SetImmediate, AddImmediate,
    Copy, Or, And, Xor, AddWithCarry, SubtractWithBorrow, ShiftRight, ReverseSubtract, ShiftLeft,
    SkipIfRegistersNotEqual, SetIndex, JumpPlusV0, RandomMask, DrawSprite,
    SkipIfKeyDown, SkipIfKeyUp,
    ReadDelayTimer, BlockOnKeyPress, SetDelayTimer, SetSoundTimer,
    AddToIndexRegister, UseSprite, ReadRegisterAsBCD, DumpRegisters, FillRegisters,
)
