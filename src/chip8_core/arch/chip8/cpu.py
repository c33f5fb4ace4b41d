# chip8_core/arch/chip8/cpu.py
"""
CHIP-8 CPUエミュレーションの中心モジュール。

命令サイクルの駆動に加えて、外部ドライバ（入力、タイマー、画面、音声、ローダー）が
マシン状態を読み書きするための最小限のアクセサを提供します。
"""
import logging
from typing import Dict, List, Optional

from chip8_core.core.cpu import AbstractCpu
from chip8_core.core.snapshot import Operation
from chip8_core.core.state import AwaitingKey, RUNNING
from chip8_core.transport.bus import BusAccess
from chip8_core.arch.chip8.state import (
    Chip8CpuState, PROGRAM_START, KEY_COUNT, REGISTER_COUNT, SCREEN_WIDTH, SCREEN_HEIGHT,
)
from chip8_core.arch.chip8.instructions import decode_opcode, execute_instruction, ExecutionContext

logger = logging.getLogger(__name__)

# @intent:responsibility CHIP-8 CPUの具体的なエミュレーションロジック（フェッチ、デコード、実行）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 をエミュレートするクラス。
    キー入力待ち中の命令フェッチ抑止は呼び出し元の責務です（`is_waiting_for_key`を参照）。
    """
    def __init__(self, context: Optional[ExecutionContext] = None, program_start: int = PROGRAM_START):
        self._context = context if context is not None else ExecutionContext()
        self._program_start = program_start
        super().__init__()

    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState(pc=self._program_start)

    def get_state(self) -> Chip8CpuState:
        return self._state

    def get_context(self) -> ExecutionContext:
        return self._context

    # @intent:responsibility PCが指す2バイトをビッグエンディアンの命令語として読み出します。
    def _fetch(self) -> int:
        memory = self._state.memory
        return (memory.read(self._state.pc) << 8) | memory.read(self._state.pc + 1)

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._context)

    def _collect_bus_activity(self) -> List[BusAccess]:
        return self._state.memory.get_and_clear_activity_log()

    # @intent:responsibility 呼び出し元向けに、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        regs = {f"V{i:X}": s.registers[i] for i in range(REGISTER_COUNT)}
        regs.update({
            "I": s.index, "PC": s.pc, "DT": s.delay_timer, "ST": s.sound_timer, "SP": len(s.stack)
        })
        return regs

    # --- Program loader ---
    # @intent:responsibility プログラムをプログラム領域へロードし、ロードしたバイト数を返します。
    def load_program(self, data: bytes) -> int:
        from chip8_core.loader.loader import RomLoader # loader -> arch.chip8.state の循環を避ける
        loaded = RomLoader().load_bytes(data, self._state.memory, self._program_start)
        logger.debug("Loaded %d bytes at %#05x", loaded, self._program_start)
        return loaded

    # --- Input driver ---
    @staticmethod
    def _check_key(key: int) -> None:
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"Key index {key!r} is outside 0x0-0xF.")

    # @intent:responsibility キー押下を反映します。キー入力待ち中であれば、キー番号を格納して待ちを解除します。
    def key_down(self, key: int) -> None:
        self._check_key(key)
        s = self._state
        s.keys[key] = True
        if isinstance(s.execution_state, AwaitingKey):
            s.registers[s.execution_state.register] = key
            logger.debug("Key %X stored in V%X, resuming", key, s.execution_state.register)
            s.execution_state = RUNNING

    def key_up(self, key: int) -> None:
        self._check_key(key)
        self._state.keys[key] = False

    @property
    def is_waiting_for_key(self) -> bool:
        return self._state.waiting_for_keypress

    # --- Timer driver ---
    # @intent:responsibility 遅延タイマーとサウンドタイマーを1ずつ減算します（0で下げ止まり）。
    # @intent:pre-condition 呼び出し元が一定周期（通常60Hz）で呼び出します。
    def tick_timers(self) -> None:
        s = self._state
        if s.delay_timer > 0:
            s.delay_timer -= 1
        if s.sound_timer > 0:
            s.sound_timer -= 1

    # --- Audio driver ---
    @property
    def is_sound_active(self) -> bool:
        return self._state.sound_timer > 0

    # --- Display driver ---
    # @intent:responsibility 画面バッファの読み取り専用コピーを返します。
    def get_framebuffer(self) -> bytes:
        return bytes(self._state.gfx)

    def get_framebuffer_rows(self) -> List[bytes]:
        gfx = self.get_framebuffer()
        return [gfx[y * SCREEN_WIDTH:(y + 1) * SCREEN_WIDTH] for y in range(SCREEN_HEIGHT)]
