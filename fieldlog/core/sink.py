"""Writing encoded records to text or binary streams"""

import io
from typing import IO


def is_text_stream(stream: IO) -> bool:
    """True for streams that take str, e.g. sys.stdout or io.StringIO."""
    return isinstance(stream, io.TextIOBase) or hasattr(stream, "encoding")


def write_to(stream: IO, data: bytes) -> None:
    """
    Write data to stream and flush it.

    Text streams receive the decoded text. A stream of unknown kind gets
    bytes first and the decoded text if it rejects bytes with TypeError.
    """
    if is_text_stream(stream):
        stream.write(data.decode("utf-8", errors="replace"))
    else:
        try:
            stream.write(data)
        except TypeError:
            stream.write(data.decode("utf-8", errors="replace"))
    if hasattr(stream, "flush"):
        stream.flush()
