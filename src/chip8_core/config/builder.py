import logging
import random

from chip8_core.arch.chip8.cpu import Chip8Cpu
from chip8_core.arch.chip8.instructions import ExecutionContext
from chip8_core.arch.chip8.state import REGISTER_COUNT
from chip8_core.loader.loader import RomLoader
from chip8_core.transport.bus import MEMORY_SIZE
from .models import SystemConfig, CpuInitialState

logger = logging.getLogger(__name__)

# @intent:responsibility システム構成（Config）に基づいて、CPUと実行コンテキストを生成し、初期状態を適用します。
class SystemBuilder:
    def build_system(self, config: SystemConfig) -> Chip8Cpu:
        if config.architecture != "CHIP8":
            raise ValueError(f"Unsupported architecture: {config.architecture}")
        if config.memory.size != MEMORY_SIZE:
            raise ValueError(f"CHIP-8 memory size is fixed at {MEMORY_SIZE:#06x}, got {config.memory.size:#06x}")
        if not 0 <= config.memory.program_start < MEMORY_SIZE:
            raise ValueError(f"Program start {config.memory.program_start:#06x} is outside memory")
        if config.stack_limit is not None and config.stack_limit <= 0:
            raise ValueError(f"Stack limit must be positive, got {config.stack_limit}")

        context = ExecutionContext(
            rng=random.Random(config.random_seed),
            stack_limit=config.stack_limit,
            index_mask=config.index_mask,
        )
        cpu = Chip8Cpu(context, program_start=config.memory.program_start)

        if config.rom:
            RomLoader().load_file(config.rom, cpu.get_state().memory, config.memory.program_start)

        # 初期状態の適用
        self.apply_initial_state(cpu, config.initial_state)

        return cpu

    # @intent:responsibility Configで定義された初期状態をCPUに適用します。
    # @intent:rationale ROMのロード後に呼び出すため、リセットは行わずレジスタのみを上書きします。
    def apply_initial_state(self, cpu: Chip8Cpu, config_state: CpuInitialState) -> None:
        state = cpu.get_state()
        if config_state.pc is not None:
            state.pc = config_state.pc
        state.index = config_state.index
        for reg_name, value in config_state.registers.items():
            index = self._register_index(reg_name)
            if index is None:
                logger.warning("Unknown register '%s' in initial_state, ignoring", reg_name)
                continue
            state.registers[index] = value & 0xFF

    @staticmethod
    def _register_index(name: str):
        if len(name) == 2 and name[0] == "V":
            try:
                index = int(name[1], 16)
            except ValueError:
                return None
            if index < REGISTER_COUNT:
                return index
        return None
