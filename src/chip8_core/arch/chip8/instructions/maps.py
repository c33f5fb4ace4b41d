# chip8_core/arch/chip8/instructions/maps.py
"""
命令語・命令型と命令実装のマッピング定義。
"""
from . import control
from . import alu
from . import load
from . import display
from . import operations as ops

# @intent:map 命令語の上位ニブルからデコード関数へのマッピングテーブル。
DECODE_MAP = {
    0x0: control.decode_0nnn,
    0x1: control.decode_1nnn,
    0x2: control.decode_2nnn,
    0x3: control.decode_3xkk,
    0x4: control.decode_4xkk,
    0x5: control.decode_5xy0,
    0x6: alu.decode_6xkk,
    0x7: alu.decode_7xkk,
    0x8: alu.decode_8xyn,
    0x9: control.decode_9xy0,
    0xA: load.decode_annn,
    0xB: control.decode_bnnn,
    0xC: alu.decode_cxkk,
    0xD: display.decode_dxyn,
    0xE: control.decode_exkk,
    0xF: load.decode_fxkk,
}

# @intent:map 命令型から実行関数へのマッピングテーブル。ops.ALL_OPERATIONS を網羅します。
EXECUTE_MAP = {
    # Control
    ops.ReturnFromSubroutine: control.execute_ret,
    ops.Call: control.execute_call,
    ops.Jump: control.execute_jp,
    ops.CallSubroutine: control.execute_call,
    ops.SkipIfEqualImmediate: control.execute_se_imm,
    ops.SkipIfNotEqualImmediate: control.execute_sne_imm,
    ops.SkipIfRegistersEqual: control.execute_se_reg,
    ops.SkipIfRegistersNotEqual: control.execute_sne_reg,
    ops.JumpPlusV0: control.execute_jp_v0,
    ops.SkipIfKeyDown: control.execute_skp,
    ops.SkipIfKeyUp: control.execute_sknp,

    # ALU
    ops.SetImmediate: alu.execute_ld_imm,
    ops.AddImmediate: alu.execute_add_imm,
    ops.Copy: alu.execute_ld_reg,
    ops.Or: alu.execute_or,
    ops.And: alu.execute_and,
    ops.Xor: alu.execute_xor,
    ops.AddWithCarry: alu.execute_add_reg,
    ops.SubtractWithBorrow: alu.execute_sub,
    ops.ShiftRight: alu.execute_shr,
    ops.ReverseSubtract: alu.execute_subn,
    ops.ShiftLeft: alu.execute_shl,
    ops.RandomMask: alu.execute_rnd,

    # Load / Timer / Memory
    ops.SetIndex: load.execute_ld_i,
    ops.ReadDelayTimer: load.execute_ld_vx_dt,
    ops.BlockOnKeyPress: load.execute_ld_vx_k,
    ops.SetDelayTimer: load.execute_ld_dt,
    ops.SetSoundTimer: load.execute_ld_st,
    ops.AddToIndexRegister: load.execute_add_i,
    ops.UseSprite: load.execute_ld_f,
    ops.ReadRegisterAsBCD: load.execute_ld_b,
    ops.DumpRegisters: load.execute_ld_mem_regs,
    ops.FillRegisters: load.execute_ld_regs_mem,

    # Display
    ops.ClearDisplay: display.execute_cls,
    ops.DrawSprite: display.execute_drw,
}
