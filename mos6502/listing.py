"""Human-readable listings of machine code with addresses and hex dumps."""

from __future__ import annotations

from typing import Optional

from .ast import AST, Node
from .codegen import instruction_to_bytes
from .instruction import Instruction

_HEADER = "  Addr  Hexdump   Instructions\n" "------------------------------\n"


def generate_line(addr: int, ins: Instruction) -> str:
    """One listing line for an instruction at an address.

    E.g. ``0x8000  20 06 80  JSR $8006``.
    """
    hexdump = " ".join(f"{b:02x}" for b in instruction_to_bytes(ins))
    return f"0x{addr:04x}  {hexdump:<8}  {ins}\n"


def generate(program_addr: int, ast: AST) -> str:
    """A listing of every instruction in the tree, starting at ``program_addr``.

    A run of identical instructions is shown once, and the first repeat in
    the whole listing is marked with a ``*`` line.
    """
    parts = [_HEADER]
    current_address = program_addr
    last_node: Optional[Node] = None
    first_double = True

    for node in ast:
        same_as_last = last_node is not None and last_node == node
        if isinstance(node, Instruction):
            if same_as_last and first_double:
                parts.append("*\n")
                first_double = False
            elif not same_as_last:
                parts.append(generate_line(current_address, node))
            current_address += node.size()
        last_node = node

    return "".join(parts)