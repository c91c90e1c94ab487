from typing import Dict

from bfcore.errors import UnmatchedCloseError, UnmatchedOpenError


def build_jump_table(code: str) -> Dict[int, int]:
    """Map each bracket position to the position of its partner.

    The table is symmetric: table[open] == close and table[close] == open.
    Raises UnmatchedCloseError / UnmatchedOpenError on unbalanced brackets.
    """
    jump_table: Dict[int, int] = {}
    stack = []

    for i, cmd in enumerate(code):
        if cmd == '[':
            stack.append(i)
        elif cmd == ']':
            if not stack:
                raise UnmatchedCloseError(i)
            start = stack.pop()
            jump_table[start] = i
            jump_table[i] = start

    if stack:
        raise UnmatchedOpenError(stack[-1])

    return jump_table
