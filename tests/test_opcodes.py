import pytest

from mos6502.instruction import AddressingMode, Mnemonic
from mos6502.opcodes import OPCODE_MAPPING, OpcodeMapping


def test_forward_lookup_known_values():
    assert OPCODE_MAPPING.find_opcode(Mnemonic.LDA, AddressingMode.IMMEDIATE) == 0xA9
    assert OPCODE_MAPPING.find_opcode(Mnemonic.JSR, AddressingMode.ABSOLUTE) == 0x20
    assert OPCODE_MAPPING.find_opcode(Mnemonic.BRK, AddressingMode.IMPLIED) == 0x00


def test_reverse_lookup_known_values():
    assert OPCODE_MAPPING.find_instruction(0xBD) == (Mnemonic.LDA, AddressingMode.ABSOLUTE_X)
    assert OPCODE_MAPPING.find_instruction(0xD0) == (Mnemonic.BNE, AddressingMode.RELATIVE)


def test_unknown_combination_returns_none():
    assert OPCODE_MAPPING.find_opcode(Mnemonic.STA, AddressingMode.IMMEDIATE) is None
    assert OPCODE_MAPPING.find_opcode(Mnemonic.LDA, AddressingMode.CONSTANT) is None


def test_unknown_opcode_returns_none():
    assert OPCODE_MAPPING.find_instruction(0x02) is None
    assert OPCODE_MAPPING.find_instruction(0xFF) is None


def test_mapping_is_a_bijection():
    mapping = OpcodeMapping()
    entries = list(mapping)
    opcodes = [opcode for _, _, opcode in entries]
    pairs = [(m, a) for m, a, _ in entries]
    assert len(set(opcodes)) == len(opcodes)
    assert len(set(pairs)) == len(pairs)
    assert len(mapping) == len(entries)
    for mnemonic, mode, opcode in entries:
        assert mapping.find_instruction(opcode) == (mnemonic, mode)
        assert mapping.find_opcode(mnemonic, mode) == opcode


@pytest.mark.parametrize("entry", list(OpcodeMapping()))
def test_round_trip(entry):
    mnemonic, mode, opcode = entry
    mapping = OpcodeMapping()
    assert mapping.find_opcode(mnemonic, mode) == opcode
    assert mapping.find_instruction(opcode) == (mnemonic, mode)
    assert 0 <= opcode <= 0xFF


@pytest.mark.parametrize("mnemonic", list(Mnemonic))
def test_every_mnemonic_has_an_opcode(mnemonic):
    mapping = OpcodeMapping()
    found = {}
    for mode in AddressingMode:
        opcode = mapping.find_opcode(mnemonic, mode)
        if opcode is not None:
            found[mode] = opcode
    assert len(found) >= 1
    for mode, opcode in found.items():
        assert mapping.find_instruction(opcode) == (mnemonic, mode)


@pytest.mark.parametrize(
    "mnemonic", [m for m in Mnemonic if m.is_branching_instruction()]
)
def test_branches_only_relative(mnemonic):
    mapping = OpcodeMapping()
    opcode = mapping.find_opcode(mnemonic, AddressingMode.RELATIVE)
    assert mapping.find_instruction(opcode) == (mnemonic, AddressingMode.RELATIVE)
    for mode in AddressingMode:
        if mode is not AddressingMode.RELATIVE:
            assert mapping.find_opcode(mnemonic, mode) is None