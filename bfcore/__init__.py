"""
Core of the Brainfuck interpreter: decoding, bracket matching, the tape
and the execution engine.
"""
