"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color, Rank
from checkie.core.piece import Piece
from checkie.core.types import Position

BoardFactory = Callable[..., Board]


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def make_board() -> BoardFactory:
    """Build a board from a ``{(row, cell): char}`` layout.

    Usage::

        board = make_board({(3, 2): "r", (2, 3): "w"})
    """

    def _make(layout: dict[tuple[int, int], str]) -> Board:
        return Board.from_pieces(
            {Position(*rc): Piece.from_char(ch) for rc, ch in layout.items()}
        )

    return _make


@pytest.fixture
def red_man() -> Piece:
    return Piece(Color.RED, Rank.MAN)


@pytest.fixture
def white_man() -> Piece:
    return Piece(Color.WHITE, Rank.MAN)
