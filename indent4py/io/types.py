from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Anything text can be written to, such as files, `io.StringIO` or `sys.stdout`."""

    def write(self, s: str, /) -> object: ...


@runtime_checkable
class SupportsFlush(Protocol):
    def flush(self) -> object: ...


@runtime_checkable
class SupportsClose(Protocol):
    def close(self) -> object: ...
