#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

Runs a program one instruction at a time, logging the program counter,
the instruction, and a window of the memory tape around the pointer after
each step.
"""
import logging

from bfcore.io_adapter import ByteIO
from brainfuck import BrainfuckInterpreter

logger = logging.getLogger("brainfuck.debugger")


class BrainfuckDebugger(BrainfuckInterpreter):
    """Extended Brainfuck interpreter with step-by-step tracing."""

    def __init__(self, config=None, show_memory_range=10, max_steps=None):
        super().__init__(config)
        self.show_memory_range = show_memory_range
        self.max_steps = max_steps

    def debug_run(self, code, io_adapter=None):
        """Execute code step by step, logging state at DEBUG level."""
        context = self.prepare(code, io_adapter or ByteIO())
        logger.debug("Program: %d characters, %d bracket pairs",
                     len(context.program), len(context.jump_table) // 2)

        try:
            while self.max_steps is None or context.steps < self.max_steps:
                # step() fetches at pc + 1; a loop jump moves pc elsewhere afterwards
                position = context.pc + 1
                if not context.step():
                    break
                logger.debug(self.describe_step(context, position))
            else:
                if context.pc + 1 < len(context.ops):
                    logger.warning("Execution stopped after %d steps (possible infinite loop)", self.max_steps)
        finally:
            context.io.flush()

        logger.debug("Halted after %d steps", context.steps)
        return context

    def describe_step(self, context, position):
        """One trace line for the instruction executed at position."""
        tape = context.tape
        cmd = context.program[position]
        return (f"Step {context.steps:5d}: PC={position:4d} CMD={cmd!r} "
                f"PTR={tape.pointer} CELL={tape.current} MEM={self.memory_window(context)}")

    def memory_window(self, context):
        """Cells around the pointer, the current one in brackets."""
        tape = context.tape
        start = max(0, tape.pointer - self.show_memory_range // 2)
        end = min(len(tape), start + self.show_memory_range)

        # Adjust start if we're near the end
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)

        cells = []
        for i in range(start, end):
            value = int(tape.cells[i])
            cells.append(f"[{value}]" if i == tape.pointer else str(value))
        return " ".join(cells)
