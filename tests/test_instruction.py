import pytest

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
    ZeroPage,
)

ALL_MNEMONIC_NAMES = [
    "ADC", "AND", "ASL", "BCC", "BCS", "BEQ", "BIT", "BMI", "BNE", "BPL",
    "BRK", "BVC", "BVS", "CLC", "CLD", "CLI", "CLV", "CMP", "CPX", "CPY",
    "DEC", "DEX", "DEY", "EOR", "INC", "INX", "INY", "JMP", "JSR", "LDA",
    "LDX", "LDY", "LSR", "NOP", "ORA", "PHA", "PHP", "PLA", "PLP", "ROL",
    "ROR", "RTI", "RTS", "SBC", "SEC", "SED", "SEI", "STA", "STX", "STY",
    "TAX", "TAY", "TSX", "TXA", "TXS", "TYA",
]


@pytest.mark.parametrize("name", ["LDA", "LDX", "LDY", "LSR", "NOP", "ORA", "PHA"])
def test_mnemonic_parses_and_prints(name):
    mnemonic = Mnemonic(name)
    assert mnemonic.name == name
    assert str(mnemonic) == name


def test_unknown_mnemonic_raises():
    with pytest.raises(ValueError):
        Mnemonic("XYZ")


def test_mnemonic_categories():
    assert Mnemonic.BNE.is_branching_instruction()
    assert not Mnemonic.JMP.is_branching_instruction()
    assert Mnemonic.JMP.is_jumping_instruction()
    assert Mnemonic.JSR.is_jumping_instruction()
    assert not Mnemonic.BEQ.is_jumping_instruction()
    assert Mnemonic.BRK.has_implied_addressing_mode()
    assert not Mnemonic.LDA.has_implied_addressing_mode()
    assert Mnemonic.LSR.has_accumulator_addressing_mode()
    assert not Mnemonic.LDA.has_accumulator_addressing_mode()


@pytest.mark.parametrize("name", ALL_MNEMONIC_NAMES)
def test_mnemonic_categories_are_disjoint(name):
    mnemonic = Mnemonic(name)
    assert mnemonic.name == name
    flags = [
        mnemonic.is_branching_instruction(),
        mnemonic.is_jumping_instruction(),
        mnemonic.has_implied_addressing_mode(),
        mnemonic.has_accumulator_addressing_mode(),
    ]
    assert sum(flags) <= 1


@pytest.mark.parametrize(
    "mode, operand, size",
    [
        (AddressingMode.IMMEDIATE, Immediate(0x01), 2),
        (AddressingMode.ABSOLUTE, Absolute(0x0200), 3),
        (AddressingMode.ZERO_PAGE, ZeroPage(0x02), 2),
        (AddressingMode.RELATIVE, Relative(-10), 2),
        (AddressingMode.IMPLIED, Implied(), 1),
        (AddressingMode.ABSOLUTE, LabelRef("end"), 3),
        (AddressingMode.RELATIVE, LabelRef("loop"), 2),
        (AddressingMode.IMMEDIATE, ConstantRef("zero"), 2),
    ],
)
def test_size(mode, operand, size):
    assert Instruction(Mnemonic.LDA, mode, operand).size() == size


def test_size_of_unsized_constant_raises():
    ins = Instruction(Mnemonic.LDA, AddressingMode.ZERO_PAGE_X, ConstantRef("zpage"))
    with pytest.raises(ValueError):
        ins.size()


@pytest.mark.parametrize(
    "ins, text",
    [
        (Instruction(Mnemonic.JSR, AddressingMode.ABSOLUTE, Absolute(0x8006)), "JSR $8006"),
        (Instruction(Mnemonic.LDA, AddressingMode.IMMEDIATE, Immediate(0x01)), "LDA #$01"),
        (Instruction(Mnemonic.LDA, AddressingMode.ABSOLUTE, Absolute(0x0200)), "LDA $0200"),
        (
            Instruction(Mnemonic.LDA, AddressingMode.ABSOLUTE_X, Absolute(0x0200)),
            "LDA $0200,X",
        ),
        (Instruction(Mnemonic.BRK, AddressingMode.IMPLIED, Implied()), "BRK"),
        (Instruction(Mnemonic.BNE, AddressingMode.RELATIVE, LabelRef("loop")), "BNE loop"),
    ],
)
def test_str(ins, text):
    assert str(ins) == text


def test_str_negative_relative_is_twos_complement():
    ins = Instruction(Mnemonic.BNE, AddressingMode.RELATIVE, Relative(-10))
    assert str(ins) == "BNE $f6"


def test_str_constant_indirect_indexed_y():
    ins = Instruction(Mnemonic.LDA, AddressingMode.INDIRECT_INDEXED_Y, ConstantRef("zpage"))
    assert str(ins) == "LDA (zpage),Y"


def test_str_invalid_mode_for_absolute_raises():
    valid = Instruction(Mnemonic.LDA, AddressingMode.INDIRECT, Absolute(0x0200))
    assert str(valid) == "LDA ($0200)"
    invalid = Instruction(Mnemonic.LDA, AddressingMode.ZERO_PAGE, Absolute(0x0200))
    with pytest.raises(ValueError):
        str(invalid)


@pytest.mark.parametrize(
    "factory, value",
    [(Immediate, 256), (ZeroPage, -1), (Absolute, 0x10000), (Relative, 128)],
)
def test_operand_range_checked(factory, value):
    with pytest.raises(ValueError):
        factory(value)


def test_instruction_equality():
    a = Instruction(Mnemonic.LDA, AddressingMode.IMMEDIATE, Immediate(0x01))
    b = Instruction(Mnemonic.LDA, AddressingMode.IMMEDIATE, Immediate(0x01))
    c = Instruction(Mnemonic.LDA, AddressingMode.IMMEDIATE, Immediate(0x02))
    assert a == b
    assert (a == c) is False
    assert Implied() == Implied()