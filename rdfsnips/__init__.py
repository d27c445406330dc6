"""Command-line filters for Turtle and N-Quads text: split, count, prefixify, hash lines, unquote."""

__version__ = "0.1.0"