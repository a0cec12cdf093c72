"""SVG viewBox attribute value."""

from __future__ import annotations

import decimal
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from typing_extensions import Self

_RE_FLOAT = re.compile(
    r'(([-+]?[0-9]+(\.[0-9]*)?|[-+]?\.[0-9]+)([eE][-+]?[0-9]+)?)'
)
_RE_SEP = re.compile(r'[\s,]+')


def floatystr(value: float) -> str:
    """Format a float without trailing zeros or scientific notation."""
    # Similar to the 'g' format but wont display scientific
    # notation for big or small numbers, and keeps all the digits
    # of the shortest repr.
    value = float(value)
    if value == 0:
        return '0'
    text = format(decimal.Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


class ViewBox:
    """The four numbers of an SVG viewBox: min-x, min-y, width, height.

    The default viewbox is all zeros, which renders as ``0 0 0 0``.
    """

    __slots__ = ('height', 'min_x', 'min_y', 'width')

    def __init__(
        self,
        min_x: float = 0,
        min_y: float = 0,
        width: float = 0,
        height: float = 0,
    ) -> None:
        self.min_x = float(min_x)
        self.min_y = float(min_y)
        self.width = float(width)
        self.height = float(height)

    @classmethod
    def from_size(cls: type[Self], width: float, height: float) -> Self:
        """A viewbox at the origin with the given size."""
        return cls(0, 0, width, height)

    @classmethod
    def parse(cls: type[Self], text: str) -> Self:
        """Parse a viewBox attribute value.

        Numbers may be separated by whitespace and/or commas.

        Raises:
            ValueError: `text` is not exactly four numbers.
        """
        fields = [f for f in _RE_SEP.split(text.strip()) if f]
        if len(fields) != 4:  # noqa: PLR2004
            raise ValueError(f'viewBox needs four numbers: {text!r}')
        for field in fields:
            if not _RE_FLOAT.fullmatch(field):
                raise ValueError(f'Invalid viewBox number: {field!r}')
        return cls(*(float(f) for f in fields))

    def __iter__(self) -> Iterator[float]:
        return iter((self.min_x, self.min_y, self.width, self.height))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ViewBox):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __str__(self) -> str:
        return ' '.join(floatystr(n) for n in self)

    def __repr__(self) -> str:
        return (
            f'ViewBox({self.min_x!r}, {self.min_y!r},'
            f' {self.width!r}, {self.height!r})'
        )
