import pytest

from chordgen.svg import (
    svg_draw_barres,
    svg_draw_bg,
    svg_draw_min_fret,
    svg_draw_muted_string,
    svg_draw_note,
    svg_draw_open_string,
    svg_draw_title,
)
from chordgen.types import Chord, GuitarString
from chordgen.utils import Palette

NOTE_CASES = [
    (6, GuitarString.D, 10, 0, 70, 105),
    (2, GuitarString.E, 12, 1, 50, 68),
    (7, GuitarString.A, 14, 2, 64, 141),
    (4, GuitarString.G, 20, 3, 110, 100),
    (9, GuitarString.B, 30, 5, 170, 215),
    (12, GuitarString.HIGH_E, 32, 10, 210, 162),
]


@pytest.mark.parametrize("fg, bg", [("#fff", "#111"), ("#111", "#333")])
@pytest.mark.parametrize("note, string, space, min_fret, cx, cy", NOTE_CASES)
def test_should_render_note(fg, bg, note, string, space, min_fret, cx, cy):
    palette = Palette(fg=fg, bg=bg)
    expected = f'<circle cx="{cx}" cy="{cy}" r="13" fill="{fg}" />'
    assert svg_draw_note(note, string, space, min_fret, palette) == expected


@pytest.mark.parametrize("note", [0, -1])
def test_note_not_drawn_for_open_or_muted(note):
    assert svg_draw_note(note, GuitarString.A, 40, 0, Palette(fg="#fff", bg="#111")) == ""


def test_should_draw_barre():
    palette = Palette(fg="#efe", bg="#333")
    barre = svg_draw_barres(5, [5, 7, 7, 6, 5, -1], 40, 5, palette)
    expected = (
        '<path d="M 50 87 C 58 77, 202 77, 210 87" stroke="#efe" '
        'stroke-width="3" fill="transparent" stroke-linecap="round" />'
    )
    assert barre == expected


def test_barre_needs_two_strings():
    palette = Palette(fg="#efe", bg="#333")
    assert svg_draw_barres(5, [5, 7, 7, 6, 7, -1], 40, 5, palette) == ""


def test_should_draw_title():
    palette = Palette(fg="#efe", bg="#333")
    chord = Chord(title="C")
    assert svg_draw_title(chord, palette) == (
        '<text x="150px" y="18" class="text" dominant-baseline="middle"\n'
        '  text-anchor="middle" font-size="24" fill="#efe" font-weight="400">C</text>'
    )

    chord = Chord(title="C", suffix="aug9")
    assert svg_draw_title(chord, palette) == (
        '<text x="150px" y="18" class="text" dominant-baseline="middle"\n'
        '        text-anchor="middle" font-size="24" fill="#efe" font-weight="400">C'
        '<tspan font-size="18" fill="#efe" font-weight="300">aug9</tspan></text>'
    )


def test_title_without_name_is_empty():
    palette = Palette(fg="#efe", bg="#333")
    assert svg_draw_title(Chord(), palette) == ""
    assert svg_draw_title(Chord(suffix="maj"), palette) == ""


def test_background():
    palette = Palette(fg="#fff", bg="#111")
    assert svg_draw_bg(True, palette) == '<rect fill="#111" width="300" height="280" rx="10" />'
    assert svg_draw_bg(False, palette) == ""


def test_min_fret_label():
    palette = Palette(fg="#fff", bg="#111")
    label = svg_draw_min_fret(5, 40, palette)
    assert label.startswith('<text x="32" y="110"')
    assert label.endswith(">5</text>")
    assert 'fill="#fff"' in label


def test_muted_and_open_strings():
    palette = Palette(fg="#fff", bg="#111")
    muted = svg_draw_muted_string(GuitarString.A, 40, palette)
    opened = svg_draw_open_string(GuitarString.A, 40, palette)
    assert muted == (
        '<text x="90" y="35" class="text" dominant-baseline="middle" '
        'text-anchor="middle" font-size="16" fill="#fff" font-weight="400">X</text>'
    )
    assert opened == muted[: -len("X</text>")] + "0</text>"