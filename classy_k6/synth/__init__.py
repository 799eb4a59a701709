"""Script synthesis from validated test plans."""

from .synthesizer import Synthesizer

__all__ = ["Synthesizer"]
