import argparse
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from xoboard.log_setup import init_logging
from xoboard.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white
PLACEHOLDER_TEXT_COLOR = QColor(160, 160, 160)

DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_dark_palette(app: QApplication):
    """
    Dark theme shared by the name inputs, buttons and status line.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.PlaceholderText, PLACEHOLDER_TEXT_COLOR)
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="xoboard", description="Two-player tic-tac-toe")
    parser.add_argument("--player-x", type=str, help="prefill player X's name", default="")
    parser.add_argument("--player-o", type=str, help="prefill player O's name", default="")
    parser.add_argument("--log-level", type=str, help="logging level", default="WARNING")
    parser.add_argument("--log-file", type=str, help="write logs to this file", default=None)
    return parser.parse_known_args(argv)


if __name__ == '__main__':
    # unknown args are left for Qt (-style, -platform, ...)
    args, qt_args = parse_args()
    init_logging(args.log_level, args.log_file)

    app = QApplication(sys.argv[:1] + qt_args)
    app.setStyle('Fusion')
    apply_dark_palette(app)

    window = TicTacToeWindow(args.player_x, args.player_o)
    window.show()
    sys.exit(app.exec())
