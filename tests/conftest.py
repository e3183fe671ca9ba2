"""
Shared pytest fixtures.

Qt runs offscreen so the window tests work without a display.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def game():
    from xoboard.game_logic import Game
    return Game()


@pytest.fixture
def started_game(game):
    game.start_game("Alice", "Bob")
    return game
