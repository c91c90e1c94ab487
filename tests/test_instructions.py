from bfcore.instructions import EXTENDED, SYMBOLS, TRADITIONAL, Op, decode, describe


def test_decode_maps_every_position():
    program = "+a?\n[]"
    ops = decode(program)
    assert len(ops) == len(program)
    assert ops == [Op.INCREMENT, Op.NOOP, Op.DUMP, Op.NOOP, Op.LOOP_OPEN, Op.LOOP_CLOSE]


def test_symbol_table():
    assert set(SYMBOLS) == set("><+-.,[]?")
    assert SYMBOLS["?"] is Op.DUMP


def test_describe_lists_instructions():
    text = describe(TRADITIONAL)
    for symbol in "><+-.,[]":
        assert f"  {symbol}  " in text
    assert "hexdump" in describe(EXTENDED)
