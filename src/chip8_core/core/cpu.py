# chip8_core/core/cpu.py
"""
Core Layer (抽象CPU)

1命令サイクル（フェッチ、デコード、PC更新、実行）の順序と、
失敗時にPCを巻き戻して例外へ命令語とアドレスを付加する規約をここで固定します。
命令ごとの振る舞いはアーキテクチャ側のInstruction Layerが担います。
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List

from chip8_core.core.errors import DecodeError, ExecutionError
from chip8_core.core.snapshot import Snapshot, Operation, Metadata
from chip8_core.core.state import CpuState
from chip8_core.transport.bus import BusAccess

logger = logging.getLogger(__name__)

# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    CPUエミュレーションの基底となる抽象クラス。
    基本的な状態管理と、命令サイクルのテンプレートを提供します。
    """
    def __init__(self):
        self._state: CpuState = self._create_initial_state()
        self._cycle_count: int = 0
        # @intent:rationale Stateオブジェクトの差し替えを避けるため、protectedな命名規則を採用。
        #                  外部からのアクセスは`get_state()`メソッドを介して行う。

    # @intent:responsibility 初期状態のCpuStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        """
        CPUの初期状態を生成して返します。
        """
        pass

    # @intent:responsibility CPUをリセットし、初期状態に戻します。
    def reset(self) -> None:
        """
        CPUの状態を初期値に戻し、実行命令数をクリアします。
        """
        self._state = self._create_initial_state()
        self._cycle_count = 0

    # @intent:responsibility 現在のCPUの状態を返します。
    def get_state(self) -> CpuState:
        return self._state

    # @intent:responsibility これまでに実行した命令数を返します。
    def get_cycle_count(self) -> int:
        return self._cycle_count

    # @intent:responsibility メモリから次の命令語をフェッチします。PCは更新しません。
    @abstractmethod
    def _fetch(self) -> int:
        pass

    # @intent:responsibility フェッチした命令語を解析し、Operationオブジェクトに変換します。
    @abstractmethod
    def _decode(self, opcode: int) -> Operation:
        pass

    # @intent:responsibility デコードされた命令を実行し、CPUの状態を更新します。
    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    # @intent:responsibility このサイクルで発生したメモリアクセスを取得し、記録をクリアします。
    @abstractmethod
    def _collect_bus_activity(self) -> List[BusAccess]:
        pass

    # @intent:responsibility CPUを1命令サイクル進め、その結果のスナップショットを返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（ログクリア→フェッチ→デコード→PC更新→実行→Snapshot生成）を定義します。
    #                  デコードはPC更新より前に行うため、デコードエラー時はマシン状態が変化しません。
    def step(self) -> Snapshot:
        """
        CPUを1命令サイクル進め、実行結果を含むSnapshotオブジェクトを返します。
        デコード・実行に失敗した場合、PCを失敗した命令のアドレスに戻し、
        命令語とPCを付加した例外を送出します。
        """
        # 1. 前処理: 前サイクルまでの残存ログを破棄
        self._collect_bus_activity()
        initial_pc = self._state.pc

        # 2. フェッチ
        opcode = self._fetch()

        # 3. デコード
        try:
            operation = self._decode(opcode)
        except DecodeError as exc:
            logger.error("Decode failed at PC %#06x: opcode %#06x", initial_pc, opcode)
            raise exc.at(initial_pc) from exc

        # 4. PC更新
        self._update_pc(operation)

        # 5. 実行
        try:
            self._execute(operation)
        except ExecutionError as exc:
            self._state.pc = initial_pc
            logger.error("Execution failed at PC %#06x: %s (%s)", initial_pc, operation, exc.message)
            raise exc.at(opcode, initial_pc) from exc

        logger.debug("PC=%#06x %04X %s", initial_pc, opcode, operation)

        # 6. Snapshot生成
        return self._create_snapshot(initial_pc, opcode, operation)

    # @intent:responsibility 命令実行前にPCを更新します。
    def _update_pc(self, operation: Operation) -> None:
        """
        命令実行前のPC更新。命令長分進める。
        """
        self._state.pc = (self._state.pc + operation.length) & 0xFFFF

    # @intent:responsibility スナップショットを生成します。
    def _create_snapshot(self, initial_pc: int, opcode: int, operation: Operation) -> Snapshot:
        bus_activity = self._collect_bus_activity()
        self._cycle_count += 1

        return Snapshot(
            state=self.get_state(), # 実行後の状態（コピーではない）
            operation=operation,
            metadata=Metadata(
                cycle_count=self._cycle_count,
                opcode=opcode,
                pc=initial_pc,
                symbol_info=str(operation),
            ),
            bus_activity=bus_activity
        )

    @abstractmethod
    def get_register_map(self) -> Dict[str, int]:
        """
        現在のレジスタ値を辞書形式で返す。
        呼び出し元がCPUの内部構造を知らなくても値を表示・記録できるようにするために使用される。
        """
        pass
