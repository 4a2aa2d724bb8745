"""Assembling complete chord diagrams from a template."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined

from chordgen.svg import (
    svg_draw_barres,
    svg_draw_bg,
    svg_draw_min_fret,
    svg_draw_muted_string,
    svg_draw_note,
    svg_draw_open_string,
    svg_draw_title,
)
from chordgen.types import Chord, GuitarString, Hand
from chordgen.utils import get_filename, get_palette

STRING_SPACE = 40
MARGIN = 30
_HIGHEST_STRING = 5

_environment = Environment(
    autoescape=False, undefined=StrictUndefined, keep_trailing_newline=True
)


def _string_for(chord: Chord, index: int) -> GuitarString:
    position = index if chord.hand is Hand.RIGHT else _HIGHEST_STRING - index
    return GuitarString.from_index(position)


def build_context(chord: Chord) -> dict[str, Any]:
    """Return the template variables describing the chord's diagram."""
    palette = get_palette(chord.mode)
    frets = chord.frets

    lowest_fret = min((fret for fret in frets if fret > 0), default=0)
    show_nut = (0 in frets and lowest_fret < 3) or 1 in frets

    muted = "".join(
        svg_draw_muted_string(_string_for(chord, i), STRING_SPACE, palette)
        for i, fret in enumerate(frets)
        if fret == -1
    )

    open_strings = ""
    if chord.barres is None:
        open_strings = "".join(
            svg_draw_open_string(_string_for(chord, i), STRING_SPACE, palette)
            for i, fret in enumerate(frets)
            if fret == 0
        )

    notes = "".join(
        svg_draw_note(fret, _string_for(chord, i), STRING_SPACE, lowest_fret, palette)
        for i, fret in enumerate(frets)
        if fret > 0
    )

    min_fret_marker = ""
    if lowest_fret > 2 or (lowest_fret > 1 and not show_nut):
        min_fret_marker = svg_draw_min_fret(lowest_fret, STRING_SPACE, palette)

    barres = ""
    if chord.barres is not None:
        if not chord.barres:
            raise ValueError("barres must name at least one fret")
        barres = svg_draw_barres(
            chord.barres[0], frets, STRING_SPACE, lowest_fret, palette
        )

    return {
        "name": svg_draw_title(chord, palette),
        "padding": MARGIN,
        "nutWidth": 9 if show_nut else 2,
        "nutShape": "round" if show_nut else "butt",
        "notes": notes,
        "minFret": min_fret_marker,
        "muted": muted,
        "open": open_strings,
        "foreground": palette.fg,
        "background": svg_draw_bg(chord.use_background, palette),
        "barres": barres,
    }


def generate_svg(chord: Chord, template: str) -> str:
    """Render the chord diagram into the given SVG template text."""
    return _environment.from_string(template).render(build_context(chord))


def render_svg(chord: Chord, template: str, output_dir: str | Path) -> int:
    """Write the diagram to ``<output_dir>/<id>.svg`` and return the id."""
    name = get_filename(chord)
    content = generate_svg(chord, template)
    Path(output_dir, f"{name}.svg").write_text(content, encoding="utf-8")
    return name