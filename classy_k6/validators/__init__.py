"""Structural validation for classified test classes."""

from .structure import StructureValidator

__all__ = ["StructureValidator"]
