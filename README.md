# chordgen

Draw guitar chord diagrams as SVG images.

A chord is described by the fret played on each of the six strings, low E
first: `0` marks an open string and `-1` a muted one. Optional extras are a
title and suffix, left- or right-handed layout, light or dark colours, a
background panel and a barred fret.

## Usage

The drawing is filled into an SVG template that you supply as Jinja2 source
text. The template receives these values: `name`, `padding`, `nutWidth`,
`nutShape`, `notes`, `minFret`, `muted`, `open`, `foreground`, `background`
and `barres`. `padding` and `nutWidth` are numbers, `nutShape` is `round` or
`butt`, `foreground` is a colour, and the rest are ready-made SVG fragments
(empty when there is nothing to draw). Autoescaping is off, so the fragments
go into the output as they are. The template is rendered with strict
undefined handling: a template that uses any other variable fails to render.

```python
from pathlib import Path

from chordgen.chart import generate_svg, render_svg
from chordgen.types import Chord, Hand, Mode

template = Path("chord.svg").read_text()

# Open C major
c_major = Chord(
    frets=[-1, 3, 2, 0, 1, 0],
    title="C",
    suffix="maj",
    mode=Mode.LIGHT,
    use_background=True,
)
svg_text = generate_svg(c_major, template)

# A barre chord drawn for a left-handed player, written to a file
barre = Chord(
    frets=[-1, 3, 5, 5, 5, 3],
    title="C",
    hand=Hand.LEFT,
    mode=Mode.DARK,
    barres=[3],
)
file_id = render_svg(barre, template, "output")
print(f"written to output/{file_id}.svg")
```

`render_svg` writes `<output_dir>/<id>.svg`, where the id is a 64-bit hash of
the chord's settings (`chordgen.utils.get_filename`), so the same chord always
produces the same file name. The directory must already exist.

`chordgen.chart.build_context` returns the values handed to the template if
you want to render them yourself. The individual fragments come from the
`svg_draw_*` functions in `chordgen.svg`.

`Hand.parse("left")` gives `Hand.LEFT`; any other text gives `Hand.RIGHT`.

## Layout details

- The nut is drawn thick when the shape uses the first fret, or has open
  strings and its lowest fretted note is below the third fret.
- When the lowest fretted note is above the second fret, or above the first
  without a thick nut, its fret number is shown beside the diagram.
- Open-string markers are left out when the chord has a barre.
- Only the first fret in `barres` is drawn, and only across two or more
  strings; a string is left out of the barre when the next played string is
  fretted lower. An empty `barres` list raises `ValueError`.
- Light mode draws dark on light (`#160c1c` on `#FBF6E2`); dark mode swaps them.

## What it does not do

chordgen is a library only: it has no command-line tool, and it ships no SVG
template, so you provide the template text yourself.