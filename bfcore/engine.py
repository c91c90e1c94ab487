"""
Execution engine.

An ExecutionContext owns everything one run needs (program, decoded
instructions, jump table, tape, program counter, configuration and I/O).
The program counter starts one position before the program and is
incremented before every fetch; running off the end halts the run.
"""
import logging
from typing import Dict, List, Optional

from bfcore.config import InterpreterConfig
from bfcore.hexdump import render_dump
from bfcore.instructions import Op, decode
from bfcore.io_adapter import ByteIO
from bfcore.jump_table import build_jump_table
from bfcore.tape import Tape

logger = logging.getLogger(__name__)


class ExecutionContext:
    def __init__(self, program: str, ops: List[Op], jump_table: Dict[int, int],
                 tape: Tape, config: InterpreterConfig, io: ByteIO):
        self.program = program
        self.ops = ops
        self.jump_table = jump_table
        self.tape = tape
        self.config = config
        self.io = io
        self.pc = -1
        self.steps = 0
        self.halted = False

    @classmethod
    def prepare(cls, program: str, config: Optional[InterpreterConfig] = None,
                io: Optional[ByteIO] = None) -> 'ExecutionContext':
        """Match brackets and allocate the tape. Raises ParseError before anything runs."""
        config = config or InterpreterConfig()
        jump_table = build_jump_table(program)
        return cls(
            program=program,
            ops=decode(program),
            jump_table=jump_table,
            tape=Tape(config.tape_size, config.cell_width),
            config=config,
            io=io or ByteIO(),
        )

    @property
    def pointer(self) -> int:
        return self.tape.pointer

    def run(self) -> None:
        """Step until the program counter runs off the end of the program."""
        try:
            while self.step():
                pass
        finally:
            self.io.flush()

    def step(self) -> bool:
        """Execute the next instruction. Returns False once the program has ended."""
        if self.halted:
            return False

        self.pc += 1
        if self.pc >= len(self.ops):
            self.halted = True
            return False

        self.execute(self.ops[self.pc])
        self.steps += 1
        return True

    def execute(self, op: Op) -> None:
        """Apply a single decoded instruction to the tape, pc or I/O."""
        tape = self.tape

        if op is Op.NOOP:
            return

        elif op is Op.MOVE_RIGHT:
            if not tape.move_right():
                logger.warning("Reached end of memory - Cannot increment memory pointer")

        elif op is Op.MOVE_LEFT:
            if not tape.move_left():
                logger.warning("Reached beginning of memory - Cannot decrement memory pointer")

        elif op is Op.INCREMENT:
            tape.increment()

        elif op is Op.DECREMENT:
            tape.decrement()

        elif op is Op.WRITE:
            self.io.write(bytes([tape.current % 256]))

        elif op is Op.READ:
            self.read_input()

        elif op is Op.LOOP_OPEN:
            if tape.current == 0:
                self.pc = self.jump_table[self.pc]

        elif op is Op.LOOP_CLOSE:
            if tape.current != 0:
                self.pc = self.jump_table[self.pc]

        elif op is Op.DUMP:
            self.io.write(self.memory_dump())

    def read_input(self) -> None:
        """Handle the , instruction: prompt, read one byte, echo, store."""
        if self.config.prompt is not None:
            self.io.write(self.config.prompt)

        value = self.io.read_byte()
        if value is None:
            # end of input: cell left unchanged
            logger.debug("End of input at pc=%d, cell %d unchanged", self.pc, self.tape.pointer)
            return

        if self.config.echo:
            self.io.write(bytes([value]))

        self.tape.store(value)

    def memory_dump(self) -> str:
        """Hexdump of the tape up to the pointer or the last nonzero cell."""
        extent = self.tape.dump_extent()
        return render_dump(self.tape.values(extent + 1), self.tape.pointer)
