"""Extraction of imports, preamble statements and class declarations."""

from .declarations import DeclarationReader
from .preamble import PreambleExtractor

__all__ = ["DeclarationReader", "PreambleExtractor"]
