"""Fragments of SVG markup for the parts of a chord diagram."""

from __future__ import annotations

from collections.abc import Sequence

from chordgen.types import Chord, GuitarString
from chordgen.utils import Palette, find_all, get_note_coords

_OFFSET_TOP = 50
_NOTE_RADIUS = 13
_STRING_LABEL_Y = 35


def svg_draw_bg(use_background: bool, palette: Palette) -> str:
    """Return a background rectangle, or nothing when no background is wanted."""
    if not use_background:
        return ""
    return f'<rect fill="{palette.bg}" width="300" height="280" rx="10" />'


def svg_draw_min_fret(min_fret: int, string_space: int, palette: Palette) -> str:
    """Return the label giving the fret the diagram starts from."""
    x = 32
    y = string_space * 2 + _OFFSET_TOP - int(string_space / 2)
    return (
        f'<text x="{x}" y="{y}" class="text" dominant-baseline="middle" '
        f'text-anchor="end" font-size="16" fill="{palette.fg}" '
        f'font-weight="400">{min_fret}</text>'
    )


def svg_draw_note(
    note: int,
    string: GuitarString,
    string_space: int,
    min_fret: int,
    palette: Palette,
) -> str:
    """Return a dot for a fretted note; open and muted notes draw nothing."""
    if note <= 0:
        return ""
    x, y = get_note_coords(note, string, string_space, min_fret)
    return f'<circle cx="{x}" cy="{y}" r="{_NOTE_RADIUS}" fill="{palette.fg}" />'


def svg_draw_barres(
    barre_fret: int,
    frets: Sequence[int],
    string_space: int,
    min_fret: int,
    palette: Palette,
) -> str:
    """Return a curve across the strings held by a barre at ``barre_fret``."""
    strings = find_all(frets, barre_fret)
    if len(strings) < 2:
        return ""

    first = get_note_coords(
        barre_fret, GuitarString.from_index(strings[0]), string_space, min_fret
    )
    last = get_note_coords(
        barre_fret, GuitarString.from_index(strings[-1]), string_space, min_fret
    )

    # lift the curve out of the centre of the fret
    y_offset = 27 if barre_fret == 1 else 23
    # control points set the angle of the curve
    control_y_offset = y_offset + 10
    control_x_offset = 8

    origin_control = (first[0] + control_x_offset, first[1] - control_y_offset)
    end_control = (last[0] - control_x_offset, last[1] - control_y_offset)

    return (
        f'<path d="M {first[0]} {first[1] - y_offset} '
        f"C {origin_control[0]} {origin_control[1]}, "
        f"{end_control[0]} {end_control[1]}, "
        f'{last[0]} {last[1] - y_offset}" stroke="{palette.fg}" '
        f'stroke-width="3" fill="transparent" stroke-linecap="round" />'
    )


def svg_draw_title(chord: Chord, palette: Palette) -> str:
    """Return the chord name, with its suffix when it has one."""
    if chord.title is None:
        return ""
    if chord.suffix is not None:
        return (
            '<text x="150px" y="18" class="text" dominant-baseline="middle"\n'
            f'        text-anchor="middle" font-size="24" fill="{palette.fg}" '
            f'font-weight="400">{chord.title}<tspan font-size="18" '
            f'fill="{palette.fg}" font-weight="300">{chord.suffix}</tspan></text>'
        )
    return (
        '<text x="150px" y="18" class="text" dominant-baseline="middle"\n'
        f'  text-anchor="middle" font-size="24" fill="{palette.fg}" '
        f'font-weight="400">{chord.title}</text>'
    )


def _string_label(string: GuitarString, string_space: int, palette: Palette, label: str) -> str:
    x = 50 + int(string) * string_space
    return (
        f'<text x="{x}" y="{_STRING_LABEL_Y}" class="text" dominant-baseline="middle" '
        f'text-anchor="middle" font-size="16" fill="{palette.fg}" '
        f'font-weight="400">{label}</text>'
    )


def svg_draw_muted_string(string: GuitarString, string_space: int, palette: Palette) -> str:
    """Return an ``X`` above a muted string."""
    return _string_label(string, string_space, palette, "X")


def svg_draw_open_string(string: GuitarString, string_space: int, palette: Palette) -> str:
    """Return a ``0`` above an open string."""
    return _string_label(string, string_space, palette, "0")