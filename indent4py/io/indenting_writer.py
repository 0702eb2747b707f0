from __future__ import annotations

import contextlib
import threading
from typing import TYPE_CHECKING, Iterable, Iterator

from typing_extensions import Self

from indent4py.errors import MissingArgumentError, WriterCloseError
from indent4py.io.types import SupportsClose, SupportsFlush, TextSink

if TYPE_CHECKING:
    from types import TracebackType

    from indent4py.indentation import Indentation

_LINE_BOUNDARIES = frozenset("\r\n")
# Failures of the delegate's close that are re-raised as-is. Anything else is wrapped in a WriterCloseError.
_PROPAGATED_CLOSE_ERRORS = (OSError, RuntimeError, TypeError, ValueError, LookupError)


class IndentingWriter:
    """Text writer that indents each new line with the current indentation.

    Writing is delegated to any object with a `write(str)` method. Indentation is inserted before the first
    character of every line that is not empty, so blank lines and `\\r\\n` pairs are never split by indentation.
    Line boundaries are tracked across calls to `write`.

    The writer provides no buffering. Wrap a buffered stream if buffering is required.
    """

    __slots__ = ("__weakref__", "_closed", "_delegate", "_indentation", "_indentation_lock", "_last_written", "_lock")

    def __init__(self, delegate: TextSink, indentation: Indentation) -> None:
        if delegate is None:
            msg = "Delegate sink is required."
            raise MissingArgumentError(msg)
        if indentation is None:
            msg = "Indentation is required."
            raise MissingArgumentError(msg)
        if not callable(getattr(delegate, "write", None)):
            msg = f"Delegate sink must have a write method, got {type(delegate).__name__}."
            raise TypeError(msg)

        self._delegate = delegate
        self._indentation = indentation
        self._indentation_lock = threading.Lock()
        self._lock = threading.Lock()
        self._last_written: str | None = None
        self._closed = False

    @property
    def delegate(self) -> TextSink:
        return self._delegate

    @property
    def indentation(self) -> Indentation:
        """The indentation inserted before each new line. Use its `level` to obtain the indentation level."""
        return self._indentation

    @indentation.setter
    def indentation(self, indentation: Indentation) -> None:
        if indentation is None:
            msg = "Indentation is required."
            raise MissingArgumentError(msg)

        with self._indentation_lock:
            self._indentation = indentation

    def get_indentation(self) -> Indentation:
        return self.indentation

    def set_indentation(self, indentation: Indentation) -> Self:
        self.indentation = indentation
        return self

    @property
    def last_written(self) -> str | None:
        """The last character forwarded to the delegate, or None if nothing was written yet."""
        return self._last_written

    @property
    def closed(self) -> bool:
        return self._closed

    def indent(self) -> Self:
        """Increase the indentation level by one.

        :return: This writer, for chaining.
        """
        with self._indentation_lock:
            self._indentation = self._indentation.indent()

        return self

    def unindent(self) -> Self:
        """Decrease the indentation level by one. The level never becomes negative.

        :return: This writer, for chaining.
        """
        with self._indentation_lock:
            self._indentation = self._indentation.unindent()

        return self

    @contextlib.contextmanager
    def indented(self) -> Iterator[Self]:
        """Indent for the duration of the `with` block and unindent afterwards, also when the block raises."""
        self.indent()
        try:
            yield self
        finally:
            self.unindent()

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        """Write text to the delegate, indenting every line that starts within it.

        :param text: The text to write. Empty text is ignored.
        :return: The number of characters written, not counting inserted indentation.
        """
        if not isinstance(text, str):
            msg = f"write() argument must be str, not {type(text).__name__}"
            raise TypeError(msg)
        if not text:
            return 0

        with self._lock:
            write = self._delegate.write
            last = self._last_written
            start = 0
            for index, char in enumerate(text):
                if (last is None or last in _LINE_BOUNDARIES) and char not in _LINE_BOUNDARIES:
                    if index > start:
                        write(text[start:index])
                        # Always the last character the delegate accepted.
                        self._last_written = last
                    start = index
                    prefix = self._indentation.value
                    if prefix:
                        write(prefix)
                last = char

            write(text[start:])
            self._last_written = last

        return len(text)

    def writelines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        if isinstance(self._delegate, SupportsFlush):
            self._delegate.flush()

    def close(self) -> None:
        """Close the delegate if it can be closed.

        I/O, runtime, type, value and lookup errors raised by the delegate propagate unchanged,
        other errors are wrapped in a `WriterCloseError`.
        """
        self._closed = True
        if not isinstance(self._delegate, SupportsClose):
            return

        try:
            self._delegate.close()
        except _PROPAGATED_CLOSE_ERRORS:
            raise
        except Exception as e:
            raise WriterCloseError(self, e) from e

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __str__(self) -> str:
        getvalue = getattr(self._delegate, "getvalue", None)
        return getvalue() if callable(getvalue) else str(self._delegate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(delegate={self._delegate!r}, indentation={self._indentation!r})"
