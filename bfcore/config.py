import os
from dataclasses import dataclass
from typing import Mapping, Optional

from bfcore.errors import InvalidConfigError

DEFAULT_TAPE_SIZE = 30000
DEFAULT_CELL_WIDTH = 8


@dataclass(frozen=True)
class InterpreterConfig:
    """Settings read once before a run.

    tape_size=None gives an unbounded tape, cell_width=None gives cells with
    unbounded precision (no wraparound).
    """
    tape_size: Optional[int] = DEFAULT_TAPE_SIZE
    cell_width: Optional[int] = DEFAULT_CELL_WIDTH
    echo: bool = False
    prompt: Optional[str] = None

    def __post_init__(self):
        if self.tape_size is not None and self.tape_size < 1:
            raise InvalidConfigError(f"tape size must be positive, got {self.tape_size}")
        if self.cell_width is not None and self.cell_width < 1:
            raise InvalidConfigError(f"cell width must be positive, got {self.cell_width}")


def _optional_size(value: str, name: str) -> Optional[int]:
    # 0 disables the limit
    try:
        n = int(value)
    except ValueError:
        raise InvalidConfigError(f"{name} must be an integer, got {value!r}")
    if n < 0:
        raise InvalidConfigError(f"{name} must not be negative, got {n}")
    return n or None


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> InterpreterConfig:
    """Build a configuration from BF_* environment variables.

    BF_ARRAY_SIZE and BF_CELL_SIZE accept 0 for "unbounded".
    """
    env = os.environ if environ is None else environ
    tape_size: Optional[int] = DEFAULT_TAPE_SIZE
    cell_width: Optional[int] = DEFAULT_CELL_WIDTH
    if "BF_ARRAY_SIZE" in env:
        tape_size = _optional_size(env["BF_ARRAY_SIZE"], "BF_ARRAY_SIZE")
    if "BF_CELL_SIZE" in env:
        cell_width = _optional_size(env["BF_CELL_SIZE"], "BF_CELL_SIZE")
    return InterpreterConfig(
        tape_size=tape_size,
        cell_width=cell_width,
        echo=_flag(env.get("BF_ECHO", "")),
        prompt=env.get("BF_PROMPT") or None,
    )
