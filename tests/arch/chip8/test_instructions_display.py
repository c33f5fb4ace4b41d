import unittest

from chip8_core.arch.chip8.state import Chip8CpuState, SCREEN_WIDTH, SCREEN_HEIGHT
from chip8_core.arch.chip8.instructions import decode_opcode, execute_instruction


class TestChip8DisplayInstructions(unittest.TestCase):
    def setUp(self):
        self.state = Chip8CpuState()

    def _execute(self, word):
        op = decode_opcode(word)
        self.state.pc += op.length
        execute_instruction(op, self.state)

    def _lit(self):
        return {(i % SCREEN_WIDTH, i // SCREEN_WIDTH) for i, v in enumerate(self.state.gfx) if v}

    def test_clear_display_scenario(self):
        self.state.gfx[:] = bytes([1]) * (SCREEN_WIDTH * SCREEN_HEIGHT)
        op = decode_opcode(0x00E0)
        self._execute(0x00E0)
        self.assertEqual(type(op).__name__, "ClearDisplay")
        self.assertEqual(self.state.gfx, bytearray(SCREEN_WIDTH * SCREEN_HEIGHT))

    def test_draw_font_glyph(self):
        # Glyph "0" lives at 0x000: F0 90 90 90 F0
        self.state.index = 0x000
        self.state.registers[0] = 10
        self.state.registers[1] = 5
        # DRW V0, V1, 5
        self._execute(0xD015)
        expected = set()
        for row, byte in enumerate((0xF0, 0x90, 0x90, 0x90, 0xF0)):
            for bit in range(8):
                if byte & (0x80 >> bit):
                    expected.add((10 + bit, 5 + row))
        self.assertEqual(self._lit(), expected)
        self.assertEqual(self.state.vf, 0)

    def test_draw_twice_erases_and_sets_collision(self):
        self.state.memory.load(0x300, [0xFF])
        self.state.index = 0x300
        self._execute(0xD011)
        self.assertEqual(self.state.vf, 0)
        self.assertEqual(len(self._lit()), 8)

        self._execute(0xD011)
        self.assertEqual(self.state.vf, 1)
        self.assertEqual(self._lit(), set())

    def test_partial_overlap_collision(self):
        self.state.memory.load(0x300, [0x80, 0xC0])
        self.state.index = 0x300
        self._execute(0xD011) # one pixel at (0,0)
        self.state.index = 0x301
        self._execute(0xD011) # (0,0) and (1,0)
        self.assertEqual(self.state.vf, 1)
        self.assertEqual(self._lit(), {(1, 0)})

    def test_no_collision_when_pixels_only_turn_on(self):
        self.state.memory.load(0x300, [0xF0, 0x0F])
        self.state.index = 0x300
        self._execute(0xD011)
        self.state.index = 0x301
        self._execute(0xD011)
        self.assertEqual(self.state.vf, 0)
        self.assertEqual(len(self._lit()), 8)

    def test_horizontal_wraparound(self):
        self.state.memory.load(0x300, [0xFF])
        self.state.index = 0x300
        self.state.registers[0] = 60
        self.state.registers[1] = 3
        self._execute(0xD011)
        self.assertEqual(self._lit(), {(60, 3), (61, 3), (62, 3), (63, 3), (0, 3), (1, 3), (2, 3), (3, 3)})

    def test_rows_below_screen_are_not_drawn(self):
        self.state.memory.load(0x300, [0x80, 0x80, 0x80])
        self.state.index = 0x300
        self.state.registers[0] = 0
        self.state.registers[1] = 30
        self._execute(0xD013)
        self.assertEqual(self._lit(), {(0, 30), (0, 31)})

    def test_zero_height_draws_nothing(self):
        self.state.vf = 1
        self._execute(0xD010)
        self.assertEqual(self._lit(), set())
        self.assertEqual(self.state.vf, 0)


if __name__ == '__main__':
    unittest.main()
