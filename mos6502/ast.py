"""Syntax tree nodes: one node per source line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from .instruction import Instruction


@dataclass(frozen=True)
class Byte:
    """A one-byte constant value."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"Byte value {self.value} out of range")

    def __str__(self) -> str:
        return f"${self.value:02x}"


@dataclass(frozen=True)
class Word:
    """A two-byte constant value."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"Word value {self.value} out of range")

    def __str__(self) -> str:
        return f"${self.value:04x}"


ConstantValue = Union[Byte, Word]


@dataclass(frozen=True)
class Constant:
    """A constant definition, e.g. ``define max_items $FF``."""

    identifier: str
    value: ConstantValue

    def __str__(self) -> str:
        return f"define {self.identifier} {self.value}"


@dataclass(frozen=True)
class Origin:
    """The ``.org`` directive: where following code is placed in memory."""

    address: int

    def __post_init__(self) -> None:
        if not 0 <= self.address <= 0xFFFF:
            raise ValueError(f"Origin address {self.address} out of range")

    def __str__(self) -> str:
        return f".org ${self.address:04x}"


@dataclass(frozen=True)
class Label:
    """A named location in the code, resolved to an address during assembly."""

    name: str

    def __str__(self) -> str:
        return f"{self.name}:"


Directive = Origin
Node = Union[Instruction, Label, Constant, Origin]
AST = List[Node]


def format_node(node: Node) -> str:
    """Render a node as a line of source."""
    match node:
        case Instruction():
            return str(node)
        case Label():
            return str(node)
        case Constant():
            return f"  {node}"
        case Origin():
            return str(node)
    raise TypeError(f"Not an AST node: {node!r}")