import io

import pytest

from bfcore.io_adapter import ByteIO

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


@pytest.fixture
def make_io():
    """Factory returning (ByteIO, output buffer) over in-memory streams."""
    def _make(input_data=b""):
        output = io.BytesIO()
        return ByteIO(io.BytesIO(input_data), output), output
    return _make
