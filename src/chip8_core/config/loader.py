import yaml
from typing import Dict, Any, Optional
from .models import SystemConfig, MemoryLayout, CpuInitialState

class ConfigLoader:
    def load_from_file(self, path: str) -> SystemConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> SystemConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> SystemConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping, got {type(data).__name__}")

        arch = str(data.get("architecture", "CHIP8")).upper()

        # Parse Memory Layout
        memory_data = data.get("memory") or {}
        memory = MemoryLayout(
            size=self._parse_int(memory_data.get("size", 0x1000)),
            program_start=self._parse_int(memory_data.get("program_start", 0x200)),
        )

        # Parse Initial State
        initial_state_data = data.get("initial_state") or {}
        registers = {}
        for name, value in (initial_state_data.get("registers") or {}).items():
            registers[str(name).upper()] = self._parse_int(value)
        initial_state = CpuInitialState(
            pc=self._parse_optional_int(initial_state_data.get("pc")),
            index=self._parse_int(initial_state_data.get("index", 0)),
            registers=registers,
        )

        return SystemConfig(
            architecture=arch,
            memory=memory,
            stack_limit=self._parse_optional_int(data.get("stack_limit")),
            index_mask=self._parse_int(data.get("index_mask", 0xFFFF)),
            random_seed=self._parse_optional_int(data.get("random_seed")),
            timer_hz=self._parse_int(data.get("timer_hz", 60)),
            rom=data.get("rom"),
            initial_state=initial_state,
        )

    def _parse_optional_int(self, value: Any) -> Optional[int]:
        if value is None:
            return None
        return self._parse_int(value)

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
