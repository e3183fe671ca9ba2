import html
import logging

from ..game_logic import Game, MARK_X, OCCUPIED
from ..ui.board_widget import BoardWidget, X_COLOR, O_COLOR

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

_logger = logging.getLogger(__name__)

# status texts
MSG_WELCOME = "Enter names and press Start."
MSG_NEED_NAMES = "Please enter both player names to start."
MSG_NOT_STARTED = "Enter names and press Start first."
MSG_DRAW = "Draw!"
MSG_CELL_TAKEN = "That cell is already taken."


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, name_x="", name_o=""):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game = Game()
        self.board_widget = BoardWidget(self.game, parent=self)
        self._setup_ui()
        self.name_x_input.setText(name_x)
        self.name_o_input.setText(name_o)
        self._update_message(MSG_WELCOME)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_name_controls()       # names + start
        self.main_layout.addWidget(self.name_controls_widget)
        self.player_display = QLabel("")
        self.player_display.setTextFormat(Qt.RichText)
        self.player_display.setAlignment(Qt.AlignCenter)
        self.player_display.setVisible(False)  # shown after start
        self.main_layout.addWidget(self.player_display)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + restart
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.set_accept_clicks(False)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        restart_action = QAction("Restart", self)
        restart_action.triggered.connect(self.restart_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(restart_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_name_controls(self):
        '''player name inputs + start button'''
        self.name_controls_widget = QWidget()
        hl = QHBoxLayout(self.name_controls_widget)
        hl.setContentsMargins(0, 0, 0, 0)
        self.name_x_input = QLineEdit(); self.name_x_input.setPlaceholderText("Player X name")
        self.name_o_input = QLineEdit(); self.name_o_input.setPlaceholderText("Player O name")
        self.start_button = QPushButton("Start")
        self.start_button.clicked.connect(self.start_game)
        # enter in either field starts too
        self.name_x_input.returnPressed.connect(self.start_game)
        self.name_o_input.returnPressed.connect(self.start_game)
        for w in (self.name_x_input, self.name_o_input, self.start_button):
            hl.addWidget(w)

    def _create_bottom_controls(self):
        # status label + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart"); self.restart_button.clicked.connect(self.restart_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.restart_button)

    @Slot(str)
    def _update_message(self, text, is_error=False,
                         is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _update_player_display(self):
        '''"x-name (X) vs o-name (O)", active player underlined'''
        current = self.game.get_current_player().mark
        parts = []
        for p in self.game.get_players():
            color = X_COLOR if p.mark == MARK_X else O_COLOR
            deco = "underline" if p.mark == current else "none"
            parts.append(f'<span style="color: {color}; text-decoration: {deco};">'
                         f'{html.escape(p.name)} ({p.mark})</span>')
        self.player_display.setText(' <span style="color: #aaa;">vs</span> '.join(parts))

    def _show_turn(self):
        p = self.game.get_current_player()
        self._update_message(f"{p.name}'s turn ({p.mark})", is_turn=True)
        self._update_player_display()

    @Slot()
    def start_game(self):
        """
        validate names, start the game, hide the setup row
        """
        name_x = self.name_x_input.text().strip()
        name_o = self.name_o_input.text().strip()
        if not name_x or not name_o:
            self._update_message(MSG_NEED_NAMES, is_error=True)
            return

        self.game.start_game(name_x, name_o)
        # setup row is single use
        self.name_controls_widget.setVisible(False)
        self.player_display.setVisible(True)
        self.board_widget.set_accept_clicks(True)
        self._show_turn()

    @Slot()
    def restart_game(self):
        # same players, fresh board
        if not self.game.is_started():
            self._update_message(MSG_NOT_STARTED, is_error=True)
            return
        self.game.reset_game()
        self.board_widget.set_accept_clicks(True)
        self._show_turn()

    def _handle_game_over(self, msg):
        # end game UI updates
        self._update_message(msg, is_success=True)
        self.board_widget.set_accept_clicks(False)
        self._update_player_display()

    @Slot(int)
    def _on_cell_clicked(self, index):
        res = self.game.play_turn(index)
        if not res.valid:
            _logger.debug("click on %d ignored: %s", index, res.reason)
            if res.reason == OCCUPIED:
                self._update_message(MSG_CELL_TAKEN, is_error=True)
            return

        self.board_widget.update()
        if res.winner:
            winner = self.game.player_for_mark(res.winner)
            self._handle_game_over(f"{winner.name} wins! ({res.winner})")
        elif res.draw:
            self._handle_game_over(MSG_DRAW)
        else:
            self._show_turn()
