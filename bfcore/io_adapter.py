import sys
from typing import BinaryIO, Optional, Union


class ByteIO:
    """Byte-oriented input/output used by the , . and ? instructions."""

    def __init__(self, input_stream: Optional[BinaryIO] = None, output_stream: Optional[BinaryIO] = None):
        self.input_stream = input_stream if input_stream is not None else sys.stdin.buffer
        self.output_stream = output_stream if output_stream is not None else sys.stdout.buffer

    def read_byte(self) -> Optional[int]:
        """Block until one byte is available; None at end of input."""
        # a prompt must be visible before we block
        self.flush()
        data = self.input_stream.read(1)
        if not data:
            return None
        return data[0]

    def write(self, data: Union[bytes, str]) -> None:
        """Write raw bytes, or text encoded as UTF-8."""
        if isinstance(data, str):
            data = data.encode('utf-8')
        self.output_stream.write(data)

    def flush(self) -> None:
        """Push buffered output to the underlying stream."""
        self.output_stream.flush()
