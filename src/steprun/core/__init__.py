"""Core runner logic for steprun.

- sequence: StepSequence, start resolution and the run loop
"""

from .sequence import StepSequence

__all__ = ["StepSequence"]
