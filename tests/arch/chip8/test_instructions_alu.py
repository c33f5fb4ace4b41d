import random
import unittest

from chip8_core.arch.chip8.cpu import Chip8Cpu
from chip8_core.arch.chip8.instructions import decode_opcode, execute_instruction, ExecutionContext


class TestChip8AluInstructions(unittest.TestCase):
    def setUp(self):
        self.cpu = Chip8Cpu(ExecutionContext(rng=random.Random(1234)))
        self.state = self.cpu.get_state()

    def _execute(self, word):
        op = decode_opcode(word)
        self.state.pc += op.length
        execute_instruction(op, self.state, self.cpu.get_context())

    def test_ld_imm(self):
        # LD V3, #$7F
        self._execute(0x637F)
        self.assertEqual(self.state.registers[3], 0x7F)

    def test_add_imm_wraps_without_flag(self):
        self.state.registers[1] = 0xFF
        self.state.vf = 0x5
        # ADD V1, #$02
        self._execute(0x7102)
        self.assertEqual(self.state.registers[1], 0x01)
        self.assertEqual(self.state.vf, 0x5) # VF is untouched

    def test_copy_or_and_xor(self):
        self.state.registers[0xA] = 0b1100
        self.state.registers[0xB] = 0b1010
        self._execute(0x8AB1) # OR
        self.assertEqual(self.state.registers[0xA], 0b1110)
        self._execute(0x8AB2) # AND
        self.assertEqual(self.state.registers[0xA], 0b1010)
        self._execute(0x8AB3) # XOR
        self.assertEqual(self.state.registers[0xA], 0b0000)
        self.state.registers[0xB] = 0x99
        self._execute(0x8AB0) # LD
        self.assertEqual(self.state.registers[0xA], 0x99)
        self.assertEqual(self.state.registers[0xB], 0x99)

    def test_add_with_carry_scenario(self):
        self.state.registers[0xA] = 0xFF
        self.state.registers[0xB] = 0x0A
        # ADD VA, VB
        self._execute(0x8AB4)
        self.assertEqual(self.state.registers[0xA], 0x09)
        self.assertEqual(self.state.vf, 1)

    def test_add_with_carry_all_values(self):
        for a in range(256):
            for b in range(256):
                self.state.registers[1] = a
                self.state.registers[2] = b
                self._execute(0x8124)
                self.assertEqual(self.state.registers[1], (a + b) % 256)
                self.assertEqual(self.state.vf, 1 if a + b > 255 else 0)

    def test_subtract_with_borrow_all_values(self):
        for a in range(256):
            for b in range(256):
                self.state.registers[1] = a
                self.state.registers[2] = b
                self._execute(0x8125)
                self.assertEqual(self.state.registers[1], (a - b) % 256)
                self.assertEqual(self.state.vf, 1 if a >= b else 0)

    def test_reverse_subtract(self):
        self.state.registers[1] = 0x10
        self.state.registers[2] = 0x05
        # SUBN V1, V2 -> V1 = 0x05 - 0x10 (borrow)
        self._execute(0x8127)
        self.assertEqual(self.state.registers[1], 0xF5)
        self.assertEqual(self.state.vf, 0)

        self.state.registers[1] = 0x05
        self.state.registers[2] = 0x05
        self._execute(0x8127)
        self.assertEqual(self.state.registers[1], 0x00)
        self.assertEqual(self.state.vf, 1) # equal -> no borrow

    def test_shift_right_uses_vy(self):
        self.state.registers[1] = 0xAA
        self.state.registers[2] = 0b10000011
        # SHR V1, V2
        self._execute(0x8126)
        self.assertEqual(self.state.registers[1], 0b01000001)
        self.assertEqual(self.state.registers[2], 0b10000011) # VY unchanged
        self.assertEqual(self.state.vf, 1)

        self.state.registers[2] = 0b00000010
        self._execute(0x8126)
        self.assertEqual(self.state.registers[1], 0b00000001)
        self.assertEqual(self.state.vf, 0)

    def test_shift_left_writes_both_registers(self):
        self.state.registers[2] = 0b10000001
        # SHL V1, V2
        self._execute(0x812E)
        self.assertEqual(self.state.registers[1], 0b00000010)
        self.assertEqual(self.state.registers[2], 0b00000010)
        self.assertEqual(self.state.vf, 1)

        self.state.registers[2] = 0b01000000
        self._execute(0x812E)
        self.assertEqual(self.state.registers[1], 0b10000000)
        self.assertEqual(self.state.vf, 0)

    def test_shift_flags_all_values(self):
        for v in range(256):
            self.state.registers[2] = v
            self._execute(0x8126)
            self.assertEqual(self.state.vf, v & 1)
            self.state.registers[2] = v
            self._execute(0x812E)
            self.assertEqual(self.state.vf, v >> 7)

    def test_flag_register_as_destination_holds_flag(self):
        self.state.vf = 0xFF
        self.state.registers[1] = 0x01
        # ADD VF, V1 -> sum 0x100, flag wins
        self._execute(0x8F14)
        self.assertEqual(self.state.vf, 1)

    def test_random_mask(self):
        for _ in range(64):
            self._execute(0xC30F)
            self.assertEqual(self.state.registers[3] & 0xF0, 0)
        self._execute(0xC300)
        self.assertEqual(self.state.registers[3], 0)

    def test_random_is_reproducible_with_seed(self):
        values = []
        for seed in (7, 7):
            cpu = Chip8Cpu(ExecutionContext(rng=random.Random(seed)))
            op = decode_opcode(0xC0FF)
            execute_instruction(op, cpu.get_state(), cpu.get_context())
            values.append(cpu.get_state().registers[0])
        self.assertEqual(values[0], values[1])


if __name__ == '__main__':
    unittest.main()
