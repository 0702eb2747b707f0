from __future__ import annotations


class RecordingSink:
    """In-memory sink that records each write and whether it was flushed or closed."""

    def __init__(self, close_error: BaseException | None = None) -> None:
        self.writes: list[str] = []
        self.flushed = False
        self.closed = False
        self.close_error = close_error

    def write(self, s: str) -> int:
        self.writes.append(s)
        return len(s)

    def flush(self) -> None:
        self.flushed = True

    def close(self) -> None:
        self.closed = True
        if self.close_error is not None:
            raise self.close_error

    def getvalue(self) -> str:
        return "".join(self.writes)


class WriteOnlySink:
    """Sink that can neither be flushed nor closed."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def write(self, s: str) -> None:
        self.parts.append(s)

    def __str__(self) -> str:
        return "".join(self.parts)
