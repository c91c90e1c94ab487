#!/usr/bin/env python3
"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the character signified by the cell at the pointer
    ,   Input a character and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero
    ?   Output a hexdump of the memory (extension)

All other characters are treated as comments and ignored.
"""
import argparse
import io
import logging
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from bfcore.config import InterpreterConfig, config_from_env
from bfcore.engine import ExecutionContext
from bfcore.errors import InvalidConfigError, ParseError
from bfcore.instructions import EXTENDED, TRADITIONAL, describe
from bfcore.io_adapter import ByteIO

logger = logging.getLogger("brainfuck")

EXIT_FAILURE = 1


class BrainfuckInterpreter:
    def __init__(self, config=None):
        self.config = config or InterpreterConfig()
        self.context = None

    def prepare(self, code, io_adapter):
        """Match brackets and set up a fresh execution context for code."""
        self.context = ExecutionContext.prepare(code, self.config, io_adapter)
        return self.context

    def execute(self, code, io_adapter=None):
        """Run code against the given streams (stdin/stdout by default)."""
        context = self.prepare(code, io_adapter or ByteIO())
        context.run()
        return context

    def run(self, code, input_data=b""):
        """Execute Brainfuck code with in-memory input, returning everything written."""
        if isinstance(input_data, str):
            input_data = input_data.encode('utf-8')
        output = io.BytesIO()
        self.execute(code, ByteIO(io.BytesIO(input_data), output))
        return output.getvalue()

    @property
    def memory(self):
        """Cell values of the last run's tape."""
        if self.context is None:
            return []
        return self.context.tape.values()

    @property
    def pointer(self):
        """Pointer position at the end of the last run."""
        return self.context.pointer if self.context is not None else 0


def _size(value):
    """argparse type for sizes; 0 means no limit."""
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {n}")
    return n


def build_parser(defaults):
    """Command line parser whose defaults come from the environment."""
    epilog = ("traditional instructions:\n" + describe(TRADITIONAL) +
              "\n\nextended instructions:\n" + describe(EXTENDED) +
              "\n\nAll other characters are ignored. "
              "A size of 0 removes the corresponding limit.")
    parser = argparse.ArgumentParser(
        prog="bf",
        description="Brainfuck interpreter",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", help="Brainfuck source file")
    parser.add_argument("-a", "--array-size", type=_size, default=defaults.tape_size or 0,
                        help="Set memory array size to N cells (default: %(default)s)", metavar="N")
    parser.add_argument("-c", "--cell-size", type=_size, default=defaults.cell_width or 0,
                        help="Set memory cell size to N bits (default: %(default)s)", metavar="N")
    parser.add_argument("-e", "--echo", action="store_true", default=defaults.echo,
                        help="Cause the , instruction to print after input")
    parser.add_argument("-p", "--prompt", default=defaults.prompt,
                        help="Cause the , instruction to print S before input", metavar="S")
    parser.add_argument("-t", "--trace", action="store_true",
                        help="Log every executed step to stderr")
    return parser


def main(argv=None, stdin=None, stdout=None):
    """Command line entry point; returns the process exit status."""
    load_dotenv(find_dotenv(usecwd=True))

    try:
        defaults = config_from_env()
    except InvalidConfigError as e:
        print(f"Invalid environment configuration: {e}", file=sys.stderr)
        return EXIT_FAILURE

    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.trace else logging.WARNING,
        format="[bf] %(message)s",
    )

    if args.path is None:
        parser.print_usage(sys.stderr)
        return EXIT_FAILURE

    path = Path(args.path)
    if not path.is_file():
        print("File does not exist", file=sys.stderr)
        return EXIT_FAILURE

    code = path.read_text(encoding="utf-8", errors="replace")
    config = InterpreterConfig(
        tape_size=args.array_size or None,
        cell_width=args.cell_size or None,
        echo=args.echo,
        prompt=args.prompt,
    )
    io_adapter = ByteIO(stdin, stdout)

    if args.trace:
        from brainfuck_debugger import BrainfuckDebugger
        run = BrainfuckDebugger(config).debug_run
    else:
        run = BrainfuckInterpreter(config).execute

    try:
        run(code, io_adapter)
    except ParseError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    return 0


if __name__ == "__main__":
    sys.exit(main())
