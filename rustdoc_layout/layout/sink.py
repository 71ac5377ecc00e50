"""Hand finished documents to caller-owned output sinks."""

from __future__ import annotations

import io
import typing as typ

ENCODING = "utf-8"


class Sink(typ.Protocol):
    """Anything with a ``write`` method: files, buffers, sockets wrapped as files."""

    def write(self, data: typ.Any, /) -> object:  # pragma: no cover - protocol
        ...


def write_document(sink: Sink, document: str) -> None:
    """Write ``document`` to ``sink`` in a single ``write`` call.

    Text sinks (``io.TextIOBase`` subclasses) receive the string unchanged;
    every other sink receives UTF-8 bytes. Errors raised by the sink propagate
    unchanged and may leave a partial document behind.
    """
    if isinstance(sink, io.TextIOBase):
        sink.write(document)
    else:
        sink.write(document.encode(ENCODING))


__all__ = ["ENCODING", "Sink", "write_document"]
