from indent4py.io.indenting_writer import IndentingWriter
from indent4py.io.types import SupportsClose, SupportsFlush, TextSink

__all__ = [
    "IndentingWriter",
    "SupportsClose",
    "SupportsFlush",
    "TextSink",
]
