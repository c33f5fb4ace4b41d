from dataclasses import dataclass, field
from typing import Dict, Optional

@dataclass
class MemoryLayout:
    size: int = 0x1000
    program_start: int = 0x200

@dataclass
class CpuInitialState:
    pc: Optional[int] = None # None: program_start を使用
    index: int = 0x000
    registers: Dict[str, int] = field(default_factory=dict) # 例: {"V0": 0x12, "VF": 1}

@dataclass
class SystemConfig:
    architecture: str = "CHIP8"
    memory: MemoryLayout = field(default_factory=MemoryLayout)
    stack_limit: Optional[int] = None # None: 無制限
    index_mask: int = 0xFFFF
    random_seed: Optional[int] = None
    timer_hz: int = 60
    rom: Optional[str] = None
    initial_state: CpuInitialState = field(default_factory=CpuInitialState)
