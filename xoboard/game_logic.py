import logging
from dataclasses import dataclass
from typing import Optional

_logger = logging.getLogger(__name__)

BOARD_SIZE = 3                         # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

EMPTY = ''
MARK_X = 'X'
MARK_O = 'O'

DEFAULT_NAMES = ("Player X", "Player O")

# failure reasons reported by Game.play_turn
NOT_STARTED = "not-started"
GAME_OVER = "game-over"
OUT_OF_RANGE = "out-of-range"
OCCUPIED = "occupied"

# rows, cols, diags as flat row-major indices
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Board:
    """
    nine cells, row-major, '' when empty
    """
    def __init__(self):
        self._cells = [EMPTY] * CELL_COUNT

    def get_cells(self):
        # snapshot, callers can't write through it
        return tuple(self._cells)

    def set_mark(self, index, mark):
        """
        place mark on an empty cell
        returns False (and changes nothing) if the cell is taken
        """
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"cell index {index} outside 0..{CELL_COUNT - 1}")
        if self._cells[index] != EMPTY:
            return False
        self._cells[index] = mark
        return True

    def is_cell_empty(self, index):
        return 0 <= index < CELL_COUNT and self._cells[index] == EMPTY

    def is_full(self):
        return EMPTY not in self._cells

    def winner(self):
        """
        mark owning the first complete line, or None
        """
        c = self._cells
        for a, b, d in WIN_LINES:
            if c[a] == EMPTY:
                continue
            if c[a] == c[b] == c[d]:
                return c[a]
        return None

    def reset(self):
        self._cells = [EMPTY] * CELL_COUNT


@dataclass
class Player:
    name: str
    mark: str


@dataclass
class TurnResult:
    """Outcome of a single play_turn call."""
    valid: bool
    reason: Optional[str] = None    # set only when valid is False
    winner: Optional[str] = None    # winning mark
    draw: bool = False


class Game:
    """
    two-player session: turn order, win/draw, restart
    """
    def __init__(self):
        self.board = Board()
        self.players = (Player(DEFAULT_NAMES[0], MARK_X),
                        Player(DEFAULT_NAMES[1], MARK_O))
        self.current_index = 0          # 0 -> X, 1 -> O
        self.started = False
        self.game_over = False
        self.winner = None              # 'X', 'O', or None

    def start_game(self, name_x, name_o):
        """
        name the players and begin a fresh board
        may be called again to rename and restart
        """
        self.players[0].name = name_x.strip()
        self.players[1].name = name_o.strip()
        self.board.reset()
        self.current_index = 0
        self.game_over = False; self.winner = None
        self.started = True
        _logger.info("game started: %s (X) vs %s (O)",
                     self.players[0].name, self.players[1].name)

    def play_turn(self, index):
        """
        place the current player's mark at index
        returns a TurnResult; invalid moves never change state
        """
        if not self.started:
            return self._reject(index, NOT_STARTED)
        if self.game_over:
            return self._reject(index, GAME_OVER)
        # bools are ints, but never cell indices
        if not isinstance(index, int) or isinstance(index, bool) \
           or not 0 <= index < CELL_COUNT:
            return self._reject(index, OUT_OF_RANGE)

        player = self.get_current_player()
        if not self.board.set_mark(index, player.mark):
            return self._reject(index, OCCUPIED)
        _logger.debug("%s placed %s at %d", player.name, player.mark, index)

        # only the mark just placed can have completed a line
        if self.board.winner() == player.mark:
            self.game_over = True; self.winner = player.mark
            _logger.info("%s wins (%s)", player.name, player.mark)
            return TurnResult(True, winner=player.mark, draw=False)
        if self.board.is_full():
            self.game_over = True
            _logger.info("game drawn")
            return TurnResult(True, winner=None, draw=True)

        self.current_index = 1 - self.current_index
        return TurnResult(True)

    def _reject(self, index, reason):
        _logger.debug("move at %r rejected: %s", index, reason)
        return TurnResult(False, reason=reason)

    def reset_game(self):
        """
        clear board and outcome, X to move; names and started survive
        """
        self.game_over = False; self.winner = None
        self.board.reset()
        self.current_index = 0
        _logger.info("game restarted")

    def get_current_player(self):
        return self.players[self.current_index]

    def get_players(self):
        return self.players

    def player_for_mark(self, mark):
        for p in self.players:
            if p.mark == mark:
                return p
        return None

    def is_started(self):
        return self.started

    def get_cells(self):
        return self.board.get_cells()
