# chip8_core/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUの基本的な状態（プログラムカウンタ）と、
命令サイクルの実行状態（通常実行中 / キー入力待ち）を表すデータ構造を定義します。
"""
from dataclasses import dataclass
from typing import Union

# @intent:responsibility 通常実行中であることを表す実行状態です。
@dataclass(frozen=True)
class Running:
    """
    命令のフェッチが許可されている通常の実行状態。
    """

# @intent:responsibility キー入力待ちでブロックされている実行状態を表します。
# @intent:rationale 「待機中フラグ + 格納先レジスタ」を別々の変数で持つと不整合が起こり得るため、
#                  格納先レジスタを状態値そのものに持たせます。
@dataclass(frozen=True)
class AwaitingKey:
    """
    キー押下を待っている状態。押されたキーの番号は `register` に格納されます。
    """
    register: int

ExecutionState = Union[Running, AwaitingKey]

RUNNING = Running()

# @intent:responsibility CPUのレジスタ状態を保持します。アーキテクチャ固有のレジスタはこれを拡張します。
@dataclass
class CpuState:
    """
    CPUのレジスタ状態を保持するデータクラス。
    これは抽象的な基底状態であり、CHIP-8固有のレジスタ群はサブクラスで追加されます。
    """
    pc: int = 0x0000  # Program Counter
