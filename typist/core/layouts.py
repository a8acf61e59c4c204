"""Keyboard layout tables: QWERTY, Dvorak and 3l."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Tuple

EMPTY = "\0"

Layer = Tuple[Tuple[str, ...], ...]

SHIFTED = {
    "`": "~",
    "1": "!",
    "2": "@",
    "3": "#",
    "4": "$",
    "5": "%",
    "6": "^",
    "7": "&",
    "8": "*",
    "9": "(",
    "0": ")",
    "[": "{",
    "]": "}",
    "'": '"',
    ",": "<",
    ".": ">",
    "/": "?",
    "=": "+",
    "\\": "|",
    "-": "_",
    ";": ":",
}


def shift(char: str) -> str:
    """Return the character produced by ``char``'s key with Shift held."""
    if char in SHIFTED:
        return SHIFTED[char]
    if char.isascii():
        return char.upper()
    return char


def _layer(*rows: str) -> Layer:
    """Build a layer from row strings; ``_`` marks a cell with no key."""
    return tuple(tuple(EMPTY if c == "_" else c for c in row) for row in rows)


@dataclass(frozen=True)
class Layout:
    name: str
    base: Layer
    symbol: Layer = ()
    numeric: Layer = ()
    numeric_offset: int = 6

    @property
    def rows(self) -> int:
        return len(self.base)

    @property
    def cols(self) -> int:
        return max((len(row) for row in self.base), default=0)

    @property
    def has_layers(self) -> bool:
        """False for layouts with neither a symbol nor a numeric layer."""
        return bool(self.symbol or self.numeric)

    def cells(self, layer: Layer) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(row, col, char)`` for every cell of ``layer``, row-major."""
        for row_i, row in enumerate(layer):
            for col_i, char in enumerate(row):
                yield row_i, col_i, char


QWERTY = Layout(
    name="QWERTY",
    base=_layer(
        "`1234567890-=_",
        "_qwertyuiop[]\\",
        "_asdfghjkl;'__",
        "_zxcvbnm,./___",
    ),
)

DVORAK = Layout(
    name="Dvorak",
    base=_layer(
        "`1234567890[]_",
        "_',.pyfgcr/=\\_",
        "_aoeuidhtns-__",
        "_;qjkxbmwvz___",
    ),
)

THREE_L = Layout(
    name="3l",
    base=_layer(
        "qfuyzxkcwb",
        "oheaidrtns",
        ",m.j;glpv_",
    ),
    # "_" is a real key on this layer, so spell the rows out.
    symbol=(
        ('"', "_", "[", "]", "^", "!", "<", ">", "=", "&"),
        ("/", "-", "{", "}", "*", "?", "(", ")", "'", ":"),
        ("#", "$", "|", "~", "`", "+", "%", "\\", "@"),
    ),
    numeric=_layer(
        "_123",
        "_456",
        "0789",
    ),
)


class LayoutKind(enum.Enum):
    """The closed set of layouts, in switching order."""

    QWERTY = "qwerty"
    DVORAK = "dvorak"
    THREE_L = "3l"

    @property
    def layout(self) -> Layout:
        return _LAYOUTS[self]

    def next(self) -> "LayoutKind":
        members = list(LayoutKind)
        return members[(members.index(self) + 1) % len(members)]


_LAYOUTS = {
    LayoutKind.QWERTY: QWERTY,
    LayoutKind.DVORAK: DVORAK,
    LayoutKind.THREE_L: THREE_L,
}


def get_layout(name: str) -> LayoutKind:
    """Resolve a layout by name, ignoring case. Raises ``KeyError`` if unknown."""
    wanted = name.strip().lower()
    for kind in LayoutKind:
        if wanted in (kind.value, kind.layout.name.lower(), kind.name.lower()):
            return kind
    raise KeyError(name)
