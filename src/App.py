import sys
import asyncio

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget, QLabel, QVBoxLayout, QHBoxLayout

from qasync import QApplication as QAsyncApplication, QEventLoop

import clock_time
from clock_time import Time
from clock_logging import get_logger
from config import Configuration
from validation import InputValidationError, parse_value, HOURS_UPPER_LIMIT, MINUTES_UPPER_LIMIT
from Widgets import ClockFace, TimeField

logger = get_logger(__name__)

WINDOW_TITLE = "Clock"


class MainWindow(QWidget):
    def __init__(self, time=None, canvas_size=None, window_size=None):
        super().__init__()
        self.time = time if time is not None else Time()
        if canvas_size is None:
            canvas_size = Configuration.canvas_size()
        if window_size is None:
            window_size = Configuration.window_size()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(window_size, window_size)

        self.clock = ClockFace(self.time, canvas_size)

        self.hours_field = TimeField(HOURS_UPPER_LIMIT)
        self.hours_field.incrementClicked.connect(lambda: self.apply(clock_time.increment_hours))
        self.hours_field.decrementClicked.connect(lambda: self.apply(clock_time.decrement_hours))
        self.hours_field.committed.connect(lambda text: self.commit(text, clock_time.set_hours))
        self.hours_field.rejected.connect(self.report_rejected)

        self.minutes_field = TimeField(MINUTES_UPPER_LIMIT)
        self.minutes_field.incrementClicked.connect(lambda: self.apply(clock_time.increment_minutes))
        self.minutes_field.decrementClicked.connect(lambda: self.apply(clock_time.decrement_minutes))
        self.minutes_field.committed.connect(lambda text: self.commit(text, clock_time.set_minutes))
        self.minutes_field.rejected.connect(self.report_rejected)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color:#b03030;")

        row = QHBoxLayout()
        row.addStretch()
        row.addWidget(self.hours_field)
        row.addWidget(self.minutes_field)
        row.addStretch()

        layout = QVBoxLayout()
        layout.addWidget(self.clock, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addSpacing(4)
        layout.addLayout(row)
        layout.addWidget(self.status_label, alignment=Qt.AlignmentFlag.AlignCenter)
        self.setLayout(layout)

        self.refresh()

    def apply(self, mutator):
        mutator(self.time)
        self.status_label.clear()
        logger.debug("%s -> %s", mutator.__name__, self.time)
        self.refresh()

    def commit(self, text, setter):
        try:
            setter(self.time, parse_value(text))
        except InputValidationError as e:
            logger.warning("Rejected input %r: %s", text, e)
            self.status_label.setText(e.message)
        else:
            self.status_label.clear()
            logger.debug("%s(%r) -> %s", setter.__name__, text, self.time)
        self.refresh()

    def report_rejected(self, message):
        logger.warning("Rejected keystroke: %s", message)
        self.status_label.setText(message)

    def refresh(self):
        """Sync the text boxes with the stored time and repaint the face."""
        self.hours_field.setValue(self.time.hours)
        self.minutes_field.setValue(self.time.minutes)
        self.clock.update()


# App entrypoint
async def main(app):
    app_close_event = asyncio.Event()
    app.aboutToQuit.connect(app_close_event.set)

    win = MainWindow(time=Configuration.initial_time())
    win.show()
    logger.info("Clock started at %s", win.time)

    await app_close_event.wait()


def run():
    qapp = QAsyncApplication(sys.argv)
    loop = QEventLoop(qapp)
    asyncio.set_event_loop(loop)
    with loop:
        loop.run_until_complete(main(qapp))


if __name__ == "__main__":
    run()
