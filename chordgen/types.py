"""Core value types describing a chord diagram."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

LIGHT_COLOUR = "#FBF6E2"
DARK_COLOUR = "#160c1c"


class GuitarString(IntEnum):
    """A guitar string, numbered from the low E string."""

    E = 0
    A = 1
    D = 2
    G = 3
    B = 4
    HIGH_E = 5

    @classmethod
    def from_index(cls, value: int) -> GuitarString:
        """Return the string at ``value``; unknown indices fall back to low E."""
        try:
            return cls(value)
        except ValueError:
            return cls.E


class Mode(Enum):
    """Colour scheme of the diagram."""

    LIGHT = "light"
    DARK = "dark"


class Hand(Enum):
    """Handedness of the player the diagram is drawn for."""

    RIGHT = "right"
    LEFT = "left"

    @classmethod
    def parse(cls, text: str) -> Hand:
        """Parse ``"left"`` as left-handed; anything else is right-handed."""
        return cls.LEFT if text == "left" else cls.RIGHT


@dataclass
class Chord:
    """Settings for a single chord diagram.

    ``frets`` holds one value per string: -1 mutes the string, 0 leaves it open.
    """

    frets: list[int] = field(default_factory=list)
    title: str | None = None
    hand: Hand = Hand.RIGHT
    suffix: str | None = None
    mode: Mode = Mode.LIGHT
    use_background: bool = False
    barres: list[int] | None = None