"""
Instruction set.

Traditional instructions:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the character signified by the cell at the pointer
    ,   Input a character and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

Extended instructions:
    ?   Output a hexdump of the memory in canonical hex/ascii format

All other characters are treated as comments and ignored.
"""
from enum import Enum
from typing import Dict, List


class Op(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    WRITE = '.'
    READ = ','
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'
    DUMP = '?'
    NOOP = ''


SYMBOLS: Dict[str, Op] = {op.value: op for op in Op if op is not Op.NOOP}

DESCRIPTIONS: Dict[Op, str] = {
    Op.MOVE_RIGHT: "Increment the memory pointer",
    Op.MOVE_LEFT: "Decrement the memory pointer",
    Op.INCREMENT: "Increment the value at the memory pointer",
    Op.DECREMENT: "Decrement the value at the memory pointer",
    Op.WRITE: "Output (to standard output) the value at the memory pointer",
    Op.READ: "Input (from standard input) a value at the memory pointer",
    Op.LOOP_OPEN: "Jump to the matching ] if the value at the memory pointer is zero",
    Op.LOOP_CLOSE: "Jump to the matching [ if the value at the memory pointer is nonzero",
    Op.DUMP: "Output a hexdump of the memory in canonical hex/ascii format",
}

TRADITIONAL = (Op.MOVE_RIGHT, Op.MOVE_LEFT, Op.INCREMENT, Op.DECREMENT,
               Op.WRITE, Op.READ, Op.LOOP_OPEN, Op.LOOP_CLOSE)
EXTENDED = (Op.DUMP,)


def decode(program: str) -> List[Op]:
    """Resolve every program position to its instruction, NOOP for comments."""
    return [SYMBOLS.get(c, Op.NOOP) for c in program]


def describe(ops=TRADITIONAL) -> str:
    return "\n".join(f"  {op.value}  {DESCRIPTIONS[op]}" for op in ops)
