from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Mapping, overload

from typing_extensions import Final

from indent4py.errors import MissingArgumentError, NegativeIndentationLevelError

CANONICAL_CACHE_SIZE: Final = 20
DEFAULT_CACHE_SIZE: Final = 5
# Level 1 must always be cached, it defines the unit.
_MIN_CACHE_SIZE = 2
_LINE_BOUNDARIES = frozenset("\r\n")


class _LevelCache:
    """Indentation instances sharing one unit, indexed by level.

    Built once and never modified afterwards. Every instance derived from the same unit refers to it.
    """

    __slots__ = ("levels", "unit")

    def __init__(self, unit: str, size: int) -> None:
        self.unit = unit
        levels: list[Indentation] = []
        value = ""
        for level in range(max(_MIN_CACHE_SIZE, size)):
            levels.append(Indentation(level, value, self))
            value += unit

        self.levels: tuple[Indentation, ...] = tuple(levels)


@dataclass(frozen=True, eq=False, repr=False)
class Indentation:
    """Indentation to prepend whenever text is written on a new line.

    An indentation is an immutable string-like value: a unit repeated `level` times.
    Indenting and unindenting returns *other* instances and never modifies the original.

    Instances are obtained through `Indentation.of(unit)`; common units are available as the constants
    `EMPTY`, `TABS`, `TWO_SPACES` and `FOUR_SPACES`. Serialized forms retain only the unit and level and are
    restored through `Indentation.of(unit).at_level(level)`, re-using cached instances where available.
    """

    __slots__ = ("_cache", "level", "value")

    level: int
    value: str
    _cache: _LevelCache

    EMPTY: ClassVar[Indentation]
    TABS: ClassVar[Indentation]
    TWO_SPACES: ClassVar[Indentation]
    FOUR_SPACES: ClassVar[Indentation]

    @classmethod
    def of(cls, unit: str | Indentation) -> Indentation:
        """Return an indentation of the given unit at level 0.

        :param unit: The text repeated for each level of indentation. When given another indentation, its unit
            is re-used and its level-0 instance is returned.
        :return: The indentation at level 0. The canonical units return the shared constants.
        """
        if isinstance(unit, Indentation):
            return unit.at_level(0)
        if unit is None:
            msg = "Indentation unit cannot be None."
            raise MissingArgumentError(msg)
        if not isinstance(unit, str):
            msg = f"Indentation unit must be a string, got {type(unit).__name__}."
            raise TypeError(msg)

        canonical = _CANONICAL_INDENTATIONS.get(unit)
        if canonical is not None:
            return canonical

        if _LINE_BOUNDARIES.intersection(unit):
            warnings.warn(
                f"Indentation unit {unit!r} contains line boundary characters. "
                "Writers cannot tell these apart from the line breaks in the text they indent.",
                UserWarning,
                stacklevel=2,
            )

        return _LevelCache(str(unit), DEFAULT_CACHE_SIZE).levels[0]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Indentation:
        """Restore an indentation from the representation returned by `to_dict`."""
        if "level" not in data:
            msg = "Indentation level is required."
            raise MissingArgumentError(msg)

        return cls.of(data.get("unit")).at_level(data["level"])  # type: ignore[arg-type]

    @property
    def unit(self) -> str:
        """The text repeated for each level. By definition equal to this indentation at level 1."""
        return self._cache.levels[1].value

    def get_level(self) -> int:
        return self.level

    def get_unit(self) -> str:
        return self.unit

    def indent(self) -> Indentation:
        """Return the indentation one level deeper."""
        return self.at_level(self.level + 1)

    def unindent(self) -> Indentation:
        """Return the indentation one level shallower. At level 0 this returns the indentation itself."""
        return self if self.level == 0 else self.at_level(self.level - 1)

    def at_level(self, level: int) -> Indentation:
        """Return this indentation at the specified level.

        Cached instances are returned when available. Levels beyond the cache are built by extending the
        longest cached value, which is never modified.

        :param level: The indentation level, must not be negative.
        :return: The indentation at `level`.
        """
        if not isinstance(level, int) or isinstance(level, bool):
            msg = f"Indentation level must be an integer, got {type(level).__name__}."
            raise TypeError(msg)
        if level == self.level:
            return self
        if level < 0:
            raise NegativeIndentationLevelError(level)

        levels = self._cache.levels
        if level < len(levels):
            return levels[level]

        unit = self._cache.unit
        if not unit:
            return Indentation(level, "", self._cache)

        longest = levels[-1]
        return Indentation(level, longest.value + unit * (level - longest.level), self._cache)

    def char_at(self, index: int) -> str:
        if not 0 <= index < len(self.value):
            msg = f"Indentation index out of range: {index}"
            raise IndexError(msg)

        return self.value[index]

    def subsequence(self, start: int, end: int) -> str:
        """Return the characters from `start` up to but excluding `end`.

        Unlike slicing, invalid ranges are rejected instead of clamped.
        """
        if not 0 <= start <= end <= len(self.value):
            msg = f"Indentation range [{start}, {end}) out of bounds for length {len(self.value)}"
            raise IndexError(msg)

        return self.value[start:end]

    def to_dict(self) -> dict[str, Any]:
        return {"unit": self.unit, "level": self.level}

    def __len__(self) -> int:
        return len(self.value)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> str: ...

    def __getitem__(self, index: int | slice) -> str:
        if isinstance(index, slice):
            return self.value[index]

        return self.char_at(index)

    def __iter__(self) -> Iterator[str]:
        return iter(self.value)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and item in self.value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Indentation):
            return NotImplemented

        return self.level == other.level and self.unit == other.unit

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Indentation(unit={self.unit!r}, level={self.level})"

    def __reduce__(self) -> tuple[Any, ...]:
        return _restore, (self.unit, self.level)

    def __copy__(self) -> Indentation:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Indentation:
        return self


def _restore(unit: str, level: int) -> Indentation:
    return Indentation.of(unit).at_level(level)


EMPTY: Final = _LevelCache("", CANONICAL_CACHE_SIZE).levels[0]
TABS: Final = _LevelCache("\t", CANONICAL_CACHE_SIZE).levels[0]
TWO_SPACES: Final = _LevelCache("  ", CANONICAL_CACHE_SIZE).levels[0]
FOUR_SPACES: Final = _LevelCache("    ", CANONICAL_CACHE_SIZE).levels[0]

Indentation.EMPTY = EMPTY
Indentation.TABS = TABS
Indentation.TWO_SPACES = TWO_SPACES
Indentation.FOUR_SPACES = FOUR_SPACES

_CANONICAL_INDENTATIONS: dict[str, Indentation] = {
    "": EMPTY,
    "\t": TABS,
    "  ": TWO_SPACES,
    "    ": FOUR_SPACES,
}
