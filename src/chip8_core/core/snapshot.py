# chip8_core/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、デコード済み命令（Operation）と、1命令サイクルの実行結果を記録する
不変のデータ構造を定義します。呼び出し元（表示・診断）への情報提供に用いる責務を負います。
"""
from dataclasses import dataclass, field
from typing import ClassVar, List

from chip8_core.core.state import CpuState
from chip8_core.transport.bus import BusAccessType, BusAccess

__all__ = ["BusAccessType", "BusAccess", "Operation", "Metadata", "Snapshot"]

# @intent:responsibility デコードされた1命令を表す不変値の基底クラスです。
# @intent:rationale 命令ごとにサブクラスを定義し、型そのものを「閉じた命令集合」のタグとして扱います。
@dataclass(frozen=True)
class Operation:
    """
    デコード済み命令の基底クラス。
    具体的な命令はこれを継承し、オペランドをフィールドとして持ちます。
    """
    mnemonic: ClassVar[str] = "???"
    length: ClassVar[int] = 2 # 命令のバイト長（CHIP-8では常に2）

    @property
    def operands(self) -> List[str]:
        """表示用に整形したオペランドのリスト。"""
        return []

    def __str__(self) -> str:
        if self.operands:
            return f"{self.mnemonic} " + ", ".join(self.operands)
        return self.mnemonic

# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True) # 不変データ構造
class Metadata:
    """
    実行に関するメタデータ（累計命令数、命令語、実行前PCなど）を記録するデータクラス。
    """
    cycle_count: int
    opcode: int = 0x0000 # フェッチした16ビット命令語
    pc: int = 0x0000 # 命令をフェッチしたアドレス
    symbol_info: str = "" # 例: "ADD V1, V2"

# @intent:responsibility ある一時点におけるCPUとメモリアクセスの状態を不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class Snapshot:
    """
    1命令サイクル実行後の状態を記録したデータ構造。
    """
    state: CpuState
    operation: Operation
    metadata: Metadata
    bus_activity: List[BusAccess] = field(default_factory=list)
