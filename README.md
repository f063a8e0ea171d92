# mos6502

Tools for working with MOS 6502 machine code in Python:

- `mos6502.instruction`: mnemonics (`Mnemonic`), addressing modes (`AddressingMode`),
  operands (`Immediate`, `Absolute`, `ZeroPage`, `Relative`, `LabelRef`,
  `ConstantRef`, `Implied`) and `Instruction`, which knows its size in bytes and
  prints itself as assembly text.
- `mos6502.ast`: the other syntax tree nodes: `Label`, `Constant` (with a `Byte`
  or `Word` value) and the `.org` directive `Origin`, plus `format_node` to
  render any node as a line of source.
- `mos6502.token`: token and source position types (`Token`, `TokenType`,
  `SourcePosition`, `SourcePositionSpan`, `TextSpan`).
- `mos6502.symbols`: a `SymbolTable` and `resolve_symbols(ast)`, which replaces
  label and constant references with addresses and values, in place.
- `mos6502.opcodes`: `OPCODE_MAPPING`, a two-way lookup between
  (mnemonic, addressing mode) pairs and opcodes for the official 6502 instruction set.
- `mos6502.codegen`: `instruction_to_bytes` and `generate`, which turn a resolved
  syntax tree into machine code, padding with zeros up to each `.org` address.
- `mos6502.disassembler`: `disassemble_code`, which decodes bytes back into
  instructions, and a command-line disassembler.
- `mos6502.listing`: formatted listings with addresses and hex dumps.

## Installation

```
pip install .
```

Install with `pip install .[test]` to pull in pytest, then run `pytest`.

## Disassembling a binary

```
mos6502-disasm program.bin
```

This prints a listing such as:

```
  Addr  Hexdump   Instructions
------------------------------
0x0000  a9 01     LDA #$01
0x0002  ad 00 02  LDA $0200
```

Consecutive identical instructions are shown once. The first such run in the
listing is marked with a single `*` line; later runs are simply left out.
An unknown opcode or a truncated operand is reported on standard error and the
command exits with status 1.

## Using the library

```python
from mos6502.instruction import AddressingMode, Mnemonic, Immediate, Absolute, Instruction
from mos6502.codegen import generate
from mos6502.disassembler import disassemble_code
from mos6502 import listing

ast = [
    Instruction(Mnemonic.LDA, AddressingMode.IMMEDIATE, Immediate(0x01)),
    Instruction(Mnemonic.STA, AddressingMode.ABSOLUTE, Absolute(0x0200)),
]
code = generate(ast)                 # b"\xa9\x01\x8d\x00\x02"
instructions = disassemble_code(code)
print(listing.generate(0x8000, instructions))
```

Syntax trees that contain labels and constants are resolved in place before
code generation:

```python
from mos6502.ast import Byte, Constant, Label
from mos6502.instruction import ConstantRef, LabelRef, Implied
from mos6502.symbols import resolve_symbols

ast = [
    Constant("start_value", Byte(0x08)),
    Instruction(Mnemonic.LDX, AddressingMode.IMMEDIATE, ConstantRef("start_value")),
    Label("loop"),
    Instruction(Mnemonic.DEX, AddressingMode.IMPLIED, Implied()),
    Instruction(Mnemonic.BNE, AddressingMode.RELATIVE, LabelRef("loop")),
]
resolve_symbols(ast)
code = generate(ast)
```

Problems are reported as exceptions: `SymbolError` subclasses from
`mos6502.symbols`, `CodeGenError` subclasses from `mos6502.codegen` and
`DisassemblyError` from `mos6502.disassembler`.

## What this package does not do

- It does not read assembly source text. There is no lexer or parser; syntax
  trees are built in Python from the classes above. `mos6502.token` holds only
  the token types.
- It has no assembler command; the only command is `mos6502-disasm`.
- It does not execute machine code: there is no CPU emulator.