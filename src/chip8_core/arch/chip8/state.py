# chip8_core/arch/chip8/state.py
"""
CHIP-8 固有の状態定義。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from chip8_core.core.state import CpuState, ExecutionState, AwaitingKey, RUNNING
from chip8_core.transport.bus import Memory
from chip8_core.arch.chip8.font import FONT_SET, FONT_START_ADDRESS

# @intent:constant CHIP-8のメモリ配置と画面・レジスタの寸法。
PROGRAM_START = 0x200
REGISTER_COUNT = 16
FLAG_REGISTER = 0xF
KEY_COUNT = 16
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

# @intent:responsibility CHIP-8マシンの全ての状態（メモリ、レジスタ、スタック、タイマー、画面、キー）を保持します。
# @intent:rationale エミュレータのデータはこの1インスタンスだけが所有し、他のコンポーネントは複製を持ちません。
@dataclass
class Chip8CpuState(CpuState):
    """
    CHIP-8のマシン状態を保持するデータクラス。
    生成時にフォントがメモリの低位アドレスへロードされます。
    """
    pc: int = PROGRAM_START
    memory: Memory = field(default_factory=Memory)
    registers: bytearray = field(default_factory=lambda: bytearray(REGISTER_COUNT)) # V0..VF
    index: int = 0x0000 # I
    stack: List[int] = field(default_factory=list)
    delay_timer: int = 0
    sound_timer: int = 0
    gfx: bytearray = field(default_factory=lambda: bytearray(SCREEN_WIDTH * SCREEN_HEIGHT))
    keys: List[bool] = field(default_factory=lambda: [False] * KEY_COUNT)
    execution_state: ExecutionState = RUNNING

    def __post_init__(self) -> None:
        self.memory.load(FONT_START_ADDRESS, FONT_SET)

    # @intent:accessor フラグレジスタ(VF)へのアクセスを提供します。
    @property
    def vf(self) -> int:
        return self.registers[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.registers[FLAG_REGISTER] = value

    # @intent:accessor キー入力待ち状態を、待機フラグと格納先レジスタの2つの観点で参照できるようにします。
    @property
    def waiting_for_keypress(self) -> bool:
        return isinstance(self.execution_state, AwaitingKey)

    @property
    def waiting_for_keypress_target(self) -> Optional[int]:
        if isinstance(self.execution_state, AwaitingKey):
            return self.execution_state.register
        return None

    # @intent:utility_function 画面上の(x, y)のピクセル値を返します。
    def pixel(self, x: int, y: int) -> int:
        return self.gfx[y * SCREEN_WIDTH + x]
