from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, MARK_X

X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
GRID_COLOR = "#555"
BACKGROUND_COLOR = "#333"


def mark_color(mark, alpha=255):
    c = QColor(X_COLOR if mark == MARK_X else O_COLOR)
    c.setAlpha(alpha)
    return c


class BoardWidget(QWidget):
    """
    draws the 3x3 board and turns clicks into cell indices
    """
    cell_clicked = Signal(int)  # emits row-major index 0..8

    def __init__(self, game, parent=None):
        super().__init__(parent)
        self.game = game                # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setMouseTracking(True)     # hover preview
        self._accept_clicks = False     # enabled once the game starts
        self._hover_index = None

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept
        if not accept:
            self._hover_index = None
        self.update()

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        '''square side + top-left offset inside the widget'''
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w-side)/2, (h-side)/2

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        side, ox, oy = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp against float edge cases
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row*BOARD_SIZE + col

    def cell_rect(self, index):
        side, ox, oy = self._geometry()
        cell = side / BOARD_SIZE
        row, col = divmod(index, BOARD_SIZE)
        return QRectF(ox + col*cell, oy + row*cell, cell, cell)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, hover preview and winner tint
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, offset_x, offset_y = self._geometry()
            # background
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            if self.game.game_over and self.game.winner:
                board_rect = QRectF(offset_x, offset_y, side, side)
                painter.fillRect(board_rect, mark_color(self.game.winner, 60))
            cell_size = side / BOARD_SIZE
            cells = self.game.get_cells()
            # hover preview in the current player's colour
            if self._hover_index is not None and self._accept_clicks \
               and self.game.board.is_cell_empty(self._hover_index):
                mark = self.game.get_current_player().mark
                painter.fillRect(self.cell_rect(self._hover_index), mark_color(mark, 40))
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for index, sym in enumerate(cells):
                if not sym: continue
                row, col = divmod(index, BOARD_SIZE)
                cx = offset_x + col*cell_size + cell_size/2
                cy = offset_y + row*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                painter.setPen(QPen(mark_color(sym), 4))
                if sym == MARK_X:
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseMoveEvent(self, event):
        if not self._accept_clicks:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index != self._hover_index:
            self._hover_index = index
            self.update()

    def leaveEvent(self, event):
        self._hover_index = None
        self.update()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or event.button() != Qt.LeftButton:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
