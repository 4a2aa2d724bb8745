"""Geometry, colour and naming helpers for chord diagrams."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass

from chordgen.types import DARK_COLOUR, LIGHT_COLOUR, Chord, GuitarString, Mode

_OFFSET_LEFT = 50
_OFFSET_TOP = 50


def _half(value: int) -> int:
    """Integer half, truncated towards zero."""
    return int(value / 2)


def get_note_coords(
    note: int, string: GuitarString, string_space: int, min_fret: int
) -> tuple[int, int]:
    """Return the (x, y) centre of a fretted note."""
    offset_fret = note
    if min_fret > 1:
        # fret 1 is the first playable position
        offset_fret = (note - min_fret) + 2
    x = _OFFSET_LEFT + int(string) * string_space
    y = offset_fret * string_space + _OFFSET_TOP - _half(string_space)
    return x, y


@dataclass(frozen=True)
class Palette:
    """Foreground and background colours."""

    fg: str
    bg: str


def get_palette(mode: Mode) -> Palette:
    """Return the colour palette for a display mode."""
    if mode is Mode.DARK:
        return Palette(fg=LIGHT_COLOUR, bg=DARK_COLOUR)
    return Palette(fg=DARK_COLOUR, bg=LIGHT_COLOUR)


def find_all(frets: Sequence[int], search: int) -> list[int]:
    """Return indices of strings held at ``search`` that a barre can cover.

    A string is left out when the next played string is fretted lower,
    as in an E9 shape.
    """
    following = [*frets[1:], None]
    return [
        index
        for index, (fret, nxt) in enumerate(zip(frets, following))
        if fret == search and (nxt is None or nxt == -1 or nxt >= fret)
    ]


def get_filename(chord: Chord) -> int:
    """Return a stable 64-bit number identifying the chord's settings."""
    key = repr(
        (
            tuple(chord.frets),
            chord.title,
            chord.hand.value,
            chord.suffix,
            chord.mode.value,
            chord.use_background,
            None if chord.barres is None else tuple(chord.barres),
        )
    )
    digest = hashlib.blake2b(key.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big")