"""Exceptions signalling defects.

Illegal moves are never raised; they come back as
:class:`~checkie.core.validator.Rejected` verdicts.
"""

from __future__ import annotations


class CheckersError(Exception):
    """Base class for engine defects."""


class OutOfBoundsError(CheckersError, IndexError):
    """A square outside the 8x8 grid was addressed."""


class BoardInvariantError(CheckersError, RuntimeError):
    """The grid would be (or is) corrupted; the game cannot continue."""
