"""Pure string kernels."""

from .levenshtein import levenshtein

__all__ = ["levenshtein"]
