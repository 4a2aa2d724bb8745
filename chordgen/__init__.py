"""Create SVG diagrams of guitar chords from a Jinja2 template."""

__version__ = "2.1.1"
__all__ = ["chart", "svg", "types", "utils"]