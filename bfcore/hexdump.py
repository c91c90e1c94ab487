from typing import Sequence

REVERSE = '\033[7m'
REVERSE_OFF = '\033[27m'
ROW = 16


def ascii_char(value: int) -> str:
    return chr(value) if 32 <= value <= 126 else '.'


def render_row(offset: int, values: Sequence[int], pointer: int) -> str:
    """One canonical hexdump line: offset, two blocks of eight, ascii column."""
    line_hex = ''
    line_ascii = ''

    for j in range(ROW):
        index = offset + j
        value = values[index] if index < len(values) else 0

        hex_str = f"{value:02x}"
        char = ascii_char(value)

        if index == pointer:
            line_hex += REVERSE + hex_str + REVERSE_OFF
            line_ascii += REVERSE + char + REVERSE_OFF
        else:
            line_hex += hex_str
            line_ascii += char

        if j < ROW - 1:
            line_hex += ' '
        if j == 7:
            line_hex += ' '

    return f"{offset:08x}  {line_hex}  {line_ascii}\n"


def render_dump(values: Sequence[int], pointer: int) -> str:
    """Render cells 0..len(values)-1, sixteen per row, highlighting the pointer."""
    lines = "\n"
    for offset in range(0, max(len(values), 1), ROW):
        lines += render_row(offset, values, pointer)
    return lines
