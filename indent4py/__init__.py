from indent4py.errors import (
    Indent4pyError,
    MissingArgumentError,
    NegativeIndentationLevelError,
    WriterCloseError,
)
from indent4py.indentation import (
    CANONICAL_CACHE_SIZE,
    DEFAULT_CACHE_SIZE,
    EMPTY,
    FOUR_SPACES,
    TABS,
    TWO_SPACES,
    Indentation,
)
from indent4py.io import IndentingWriter

__all__ = [
    "CANONICAL_CACHE_SIZE",
    "DEFAULT_CACHE_SIZE",
    "EMPTY",
    "FOUR_SPACES",
    "TABS",
    "TWO_SPACES",
    "Indent4pyError",
    "Indentation",
    "IndentingWriter",
    "MissingArgumentError",
    "NegativeIndentationLevelError",
    "WriterCloseError",
]
