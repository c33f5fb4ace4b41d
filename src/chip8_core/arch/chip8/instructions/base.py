# chip8_core/arch/chip8/instructions/base.py
"""
CHIP-8命令実装用の共通ユーティリティ。
"""
import random
from dataclasses import dataclass, field
from typing import Optional

from chip8_core.arch.chip8.state import Chip8CpuState

# @intent:responsibility 実行関数が参照する、マシン状態以外の実行条件をまとめます。
# @intent:rationale 乱数源やスタック上限を差し替え可能にし、テストで結果を固定できるようにします。
@dataclass
class ExecutionContext:
    rng: random.Random = field(default_factory=random.Random)
    stack_limit: Optional[int] = None # None: 無制限
    index_mask: int = 0xFFFF

# --- 命令語のフィールド抽出 ---
# @intent:utility_function 命令語の各フィールドを取り出します。
def field_x(word: int) -> int:
    return (word >> 8) & 0xF

def field_y(word: int) -> int:
    return (word >> 4) & 0xF

def field_n(word: int) -> int:
    return word & 0xF

def field_kk(word: int) -> int:
    return word & 0xFF

def field_nnn(word: int) -> int:
    return word & 0x0FFF

# @intent:utility_function 次の命令を読み飛ばします（PCは既に次の命令を指しています）。
def skip_next(state: Chip8CpuState) -> None:
    state.pc = (state.pc + 2) & 0xFFFF
