import math

from PyQt6.QtCore import Qt, QPointF, QRectF, QSize, pyqtSignal
from PyQt6.QtWidgets import QWidget, QFrame, QPushButton, QLineEdit, QVBoxLayout
from PyQt6.QtGui import QPainter, QPen, QColor, QPainterPath, QFont, QValidator

from geometry import layout, draw_commands, FillCircle, FillSegment, StrokeLine, DrawText
from validation import validate_partial_input

PRIMARY_COLOR = QColor(100, 180, 255)


def qt_degrees(angle):
    """Clock angle (radians, clockwise from 12) to Qt's degrees (counterclockwise from 3)."""
    return 90.0 - math.degrees(angle)


class BoundedIntValidator(QValidator):
    """Runs the keystroke check on a text box; rejected edits never reach the box."""
    rejected = pyqtSignal(str)

    def __init__(self, upper_limit, parent=None):
        super().__init__(parent)
        self.upper_limit = upper_limit
        self.last_error = None

    def validate(self, text, pos):
        result = validate_partial_input(text, self.upper_limit)
        self.last_error = result.error
        if result.is_ok:
            return QValidator.State.Acceptable, text, pos
        self.rejected.emit(result.error.message)
        return QValidator.State.Invalid, text, pos


class TimeField(QFrame):
    """One column of the controls: ``+`` button, text box, ``-`` button."""
    incrementClicked = pyqtSignal()
    decrementClicked = pyqtSignal()
    committed = pyqtSignal(str)
    rejected = pyqtSignal(str)

    def __init__(self, upper_limit, parent=None):
        super().__init__(parent)
        self.increment_button = QPushButton("+")
        self.decrement_button = QPushButton("-")
        for b in (self.increment_button, self.decrement_button):
            b.setFixedSize(60, 26)
            b.setStyleSheet("QPushButton{border:1px solid #b0b0b0;border-radius:3px;background:#eaeaea;} QPushButton:hover{background:#dcdcdc}")

        self.text_box = QLineEdit()
        self.text_box.setFixedWidth(60)
        self.text_box.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.validator = BoundedIntValidator(upper_limit, self.text_box)
        self.validator.rejected.connect(self.rejected)
        self.text_box.setValidator(self.validator)
        self.text_box.setStyleSheet(f"""
            QLineEdit {{ background:#f8f8f8; border:1px solid #bbb; border-radius:4px; }}
            QLineEdit:focus {{ border:1px solid {PRIMARY_COLOR.name()}; background:#e8f4ff; }}
        """)

        self.increment_button.clicked.connect(self.incrementClicked)
        self.decrement_button.clicked.connect(self.decrementClicked)
        self.text_box.editingFinished.connect(self.commit)

        column = QVBoxLayout(self)
        column.setSpacing(4)
        column.addWidget(self.increment_button, alignment=Qt.AlignmentFlag.AlignCenter)
        column.addWidget(self.text_box, alignment=Qt.AlignmentFlag.AlignCenter)
        column.addWidget(self.decrement_button, alignment=Qt.AlignmentFlag.AlignCenter)

    def commit(self):
        self.committed.emit(self.text_box.text())

    def setValue(self, value):
        self.text_box.setText(str(value))


class ClockFace(QWidget):
    """Paints the clock for the ``Time`` it is given; the owner calls update() after mutating it."""

    def __init__(self, time, size, parent=None):
        super().__init__(parent)
        self.time = time
        self._size = int(size)
        self.setFixedSize(self._size, self._size)

    def sizeHint(self):
        return QSize(self._size, self._size)

    def paintEvent(self, _):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        side = min(self.width(), self.height())
        painter.translate((self.width() - side) / 2, (self.height() - side) / 2)
        for command in draw_commands(layout(self.time, side)):
            self._paint(painter, command)
        painter.end()

    def _paint(self, painter, command):
        if isinstance(command, FillCircle):
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(*command.color))
            painter.drawEllipse(QPointF(*command.center), command.radius, command.radius)
        elif isinstance(command, FillSegment):
            painter.fillPath(self._segment_path(command), QColor(*command.color))
        elif isinstance(command, StrokeLine):
            painter.setPen(QPen(QColor(*command.color), command.width))
            painter.drawLine(QPointF(*command.start), QPointF(*command.end))
        elif isinstance(command, DrawText):
            self._draw_text(painter, command)
        else:
            raise TypeError(f"unknown draw command: {command!r}")

    @staticmethod
    def _segment_path(segment):
        cx, cy = segment.center
        ro, ri = segment.outer_radius, segment.inner_radius
        outer = QRectF(cx - ro, cy - ro, 2 * ro, 2 * ro)
        inner = QRectF(cx - ri, cy - ri, 2 * ri, 2 * ri)
        start = qt_degrees(segment.start_angle)
        sweep = math.degrees(segment.sweep)
        path = QPainterPath()
        path.arcMoveTo(outer, start)
        path.arcTo(outer, start, -sweep)
        path.arcTo(inner, start - sweep, sweep)
        path.closeSubpath()
        return path

    @staticmethod
    def _draw_text(painter, text):
        font = QFont(painter.font())
        font.setPixelSize(max(1, round(text.font_size)))
        painter.setFont(font)
        painter.setPen(QColor(*text.color))
        metrics = painter.fontMetrics()
        w, h = metrics.horizontalAdvance(text.text), metrics.height()
        cx, cy = text.center
        # centered on its own footprint
        painter.drawText(QRectF(cx - w / 2, cy - h / 2, w, h), Qt.AlignmentFlag.AlignCenter, text.text)
