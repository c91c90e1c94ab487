import logging

from bfcore.config import InterpreterConfig
from brainfuck_debugger import BrainfuckDebugger


def test_debug_run_logs_each_step(make_io, caplog):
    caplog.set_level(logging.DEBUG, logger="brainfuck.debugger")
    io_adapter, output = make_io()
    context = BrainfuckDebugger().debug_run("++.", io_adapter)
    assert context.steps == 3
    assert output.getvalue() == b"\x02"
    steps = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Step")]
    assert len(steps) == 3
    assert "CMD='+'" in steps[0]
    assert "CELL=2" in steps[1]


def test_max_steps_stops_infinite_loop(make_io, caplog):
    io_adapter, _ = make_io()
    debugger = BrainfuckDebugger(max_steps=10)
    context = debugger.debug_run("+[]", io_adapter)
    assert context.steps == 10
    assert not context.halted
    assert "possible infinite loop" in caplog.text


def test_memory_window(make_io):
    io_adapter, _ = make_io()
    debugger = BrainfuckDebugger(InterpreterConfig(tape_size=8), show_memory_range=4)
    context = debugger.debug_run("+>+", io_adapter)
    assert debugger.memory_window(context) == "1 [1] 0 0"


def test_memory_window_near_tape_end(make_io):
    io_adapter, _ = make_io()
    debugger = BrainfuckDebugger(InterpreterConfig(tape_size=5), show_memory_range=4)
    context = debugger.debug_run(">>>>+", io_adapter)
    assert debugger.memory_window(context) == "0 0 0 [1]"


def traced_steps(caplog):
    return [r.getMessage() for r in caplog.records if r.getMessage().startswith("Step")]


def test_trace_reports_instruction_that_jumped(make_io, caplog):
    caplog.set_level(logging.DEBUG, logger="brainfuck.debugger")
    io_adapter, _ = make_io()
    BrainfuckDebugger().debug_run("[-]+", io_adapter)
    steps = traced_steps(caplog)
    assert len(steps) == 2
    assert "PC=   0 CMD='['" in steps[0]
    assert "PC=   3 CMD='+'" in steps[1]


def test_trace_follows_backward_jump(make_io, caplog):
    caplog.set_level(logging.DEBUG, logger="brainfuck.debugger")
    io_adapter, _ = make_io()
    BrainfuckDebugger().debug_run("++[-]", io_adapter)
    commands = [step.split("CMD=")[1][1] for step in traced_steps(caplog)]
    positions = [int(step.split("PC=")[1].split()[0]) for step in traced_steps(caplog)]
    assert commands == ["+", "+", "[", "-", "]", "-", "]"]
    assert positions == [0, 1, 2, 3, 4, 3, 4]


def test_no_warning_when_last_step_ends_program(make_io, caplog):
    io_adapter, _ = make_io()
    context = BrainfuckDebugger(max_steps=2).debug_run("++", io_adapter)
    assert context.steps == 2
    assert "possible infinite loop" not in caplog.text
