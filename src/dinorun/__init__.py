"""DINORUN - side-scrolling obstacle dodger on a glyph grid."""

__version__ = "0.1.0"
