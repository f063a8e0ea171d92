import pytest

from mos6502.ast import Byte, Constant, Label, Origin
from mos6502.codegen import (
    CodeGenError,
    InvalidOpcodeError,
    OrgDirectiveOrderError,
    ProgramOverflowError,
    generate,
    instruction_to_bytes,
)
from mos6502.instruction import (
    Absolute,
    AddressingMode,
    ConstantRef,
    Immediate,
    Implied,
    Instruction,
    LabelRef,
    Mnemonic,
    Relative,
)


def lda_imm():
    return Instruction(Mnemonic.LDA, AddressingMode.IMMEDIATE, Immediate(0x01))


def lda_abs():
    return Instruction(Mnemonic.LDA, AddressingMode.ABSOLUTE, Absolute(0x0200))


def lda_abs_x():
    return Instruction(Mnemonic.LDA, AddressingMode.ABSOLUTE_X, Absolute(0x0200))


@pytest.mark.parametrize(
    "ast, expected",
    [
        ([lda_imm()], [0xA9, 0x01]),
        ([lda_abs()], [0xAD, 0x00, 0x02]),
        ([lda_abs_x()], [0xBD, 0x00, 0x02]),
        (
            [lda_imm(), lda_abs(), lda_abs_x()],
            [0xA9, 0x01, 0xAD, 0x00, 0x02, 0xBD, 0x00, 0x02],
        ),
    ],
)
def test_compile_ast(ast, expected):
    assert generate(ast) == bytes(expected)


def test_compile_errors_org_order():
    with pytest.raises(OrgDirectiveOrderError) as info:
        generate([Origin(0x0200), Origin(0x0100)])
    assert info.value.address == 0x0100
    assert "ascending order" in str(info.value)


def test_relative_and_implied_encoding():
    ast = [
        Instruction(Mnemonic.BNE, AddressingMode.RELATIVE, Relative(-10)),
        Instruction(Mnemonic.BRK, AddressingMode.IMPLIED, Implied()),
    ]
    assert generate(ast) == bytes([0xD0, 0xF6, 0x00])


def test_org_pads_with_zeros():
    ast = [Origin(0x0004), lda_imm()]
    assert generate(ast) == bytes([0, 0, 0, 0, 0xA9, 0x01])


def test_org_after_code_pads_gap():
    result = generate([lda_imm(), Origin(0x0005), lda_imm()])
    assert result == bytes([0xA9, 0x01, 0, 0, 0, 0xA9, 0x01])


def test_org_truncates_overlapping_code():
    result = generate([lda_abs(), Origin(0x0001)])
    assert result == bytes([0xAD])


def test_labels_and_constants_emit_nothing():
    ast = [Label("start"), Constant("zero", Byte(0)), lda_imm()]
    assert generate(ast) == bytes([0xA9, 0x01])


def test_program_overflow():
    brk = Instruction(Mnemonic.BRK, AddressingMode.IMPLIED, Implied())
    with pytest.raises(ProgramOverflowError):
        generate([Origin(0xFFFF), brk])


def test_program_at_limit_fits():
    result = generate([Origin(0xFFFF)])
    assert len(result) == 0xFFFF


def test_invalid_opcode():
    ins = Instruction(Mnemonic.STA, AddressingMode.IMMEDIATE, Immediate(0x01))
    with pytest.raises(InvalidOpcodeError) as info:
        instruction_to_bytes(ins)
    assert info.value.instruction == ins
    assert isinstance(info.value, CodeGenError)


def test_invalid_opcode_from_generate():
    ins = Instruction(Mnemonic.LDA, AddressingMode.CONSTANT, ConstantRef("x"))
    with pytest.raises(InvalidOpcodeError):
        generate([ins])


def test_unresolved_label_rejected():
    ins = Instruction(Mnemonic.JMP, AddressingMode.ABSOLUTE, LabelRef("end"))
    with pytest.raises(CodeGenError, match="end"):
        instruction_to_bytes(ins)


def test_unresolved_constant_rejected():
    ins = Instruction(Mnemonic.LDX, AddressingMode.IMMEDIATE, ConstantRef("zero"))
    with pytest.raises(CodeGenError, match="zero"):
        instruction_to_bytes(ins)


def test_instruction_bytes_length_matches_size():
    for ins in (lda_imm(), lda_abs(), lda_abs_x()):
        assert len(instruction_to_bytes(ins)) == ins.size()


def test_absolute_is_little_endian():
    ins = Instruction(Mnemonic.JSR, AddressingMode.ABSOLUTE, Absolute(0x8006))
    assert instruction_to_bytes(ins) == bytes([0x20, 0x06, 0x80])