"""
Memory tape: zero-initialized integer cells addressed by a pointer.

A bounded tape is allocated once at its full size. An unbounded tape grows
(doubling, zero-filled) whenever the pointer steps onto a cell that has not
been allocated yet.
"""
from typing import List, Optional

import numpy as np

from bfcore.errors import InvalidConfigError

INITIAL_CAPACITY = 1024


class Tape:
    def __init__(self, size: Optional[int] = None, cell_width: Optional[int] = None):
        if size is not None and size < 1:
            raise InvalidConfigError(f"tape size must be positive, got {size}")
        if cell_width is not None and cell_width < 1:
            raise InvalidConfigError(f"cell width must be positive, got {cell_width}")

        self.size = size
        self.cell_width = cell_width
        self.modulus = (1 << cell_width) if cell_width is not None else None
        # int64 holds any wrapped value below 2**63; wider or unbounded cells need Python ints
        self.dtype = np.int64 if cell_width is not None and cell_width < 63 else object

        capacity = size if size is not None else INITIAL_CAPACITY
        self.cells = np.zeros(capacity, dtype=self.dtype)
        self.pointer = 0

    def __len__(self):
        return len(self.cells)

    def wrap(self, value: int) -> int:
        """Reduce value to the configured cell width (unchanged when unbounded)."""
        if self.modulus is None:
            return value
        return value % self.modulus

    @property
    def current(self) -> int:
        """Value of the cell under the pointer."""
        return int(self.cells[self.pointer])

    def store(self, value: int) -> None:
        """Write value into the current cell, reduced modulo 2**cell_width."""
        self.cells[self.pointer] = self.wrap(int(value))

    def increment(self) -> None:
        """Add one, wrapping to the cell width."""
        self.store(self.current + 1)

    def decrement(self) -> None:
        """Subtract one, wrapping to the cell width."""
        self.store(self.current - 1)

    def move_right(self) -> bool:
        """Advance the pointer; False (and no change) at the tape bound."""
        if self.size is not None and self.pointer + 1 >= self.size:
            return False
        self.pointer += 1
        if self.pointer >= len(self.cells):
            self._grow(self.pointer + 1)
        return True

    def move_left(self) -> bool:
        """Step the pointer back; False (and no change) at cell 0."""
        if self.pointer <= 0:
            return False
        self.pointer -= 1
        return True

    def _grow(self, minimum: int) -> None:
        capacity = max(minimum, 2 * len(self.cells))
        extra = np.zeros(capacity - len(self.cells), dtype=self.dtype)
        self.cells = np.concatenate([self.cells, extra])

    def dump_extent(self) -> int:
        """Last index a memory dump shows: the pointer or the last nonzero cell."""
        nonzero = np.flatnonzero(self.cells)
        if len(nonzero) == 0:
            return self.pointer
        return max(self.pointer, int(nonzero[-1]))

    def values(self, stop: Optional[int] = None) -> List[int]:
        """Cell values up to stop as plain ints."""
        return [int(v) for v in self.cells[:stop]]
