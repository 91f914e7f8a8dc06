"""Small window showing an MRU combo box hosted in a toolbar."""

import argparse
import logging
import sys

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QApplication, QLabel, QMainWindow

from mrucombo.controller import DEFAULT_MAX_ITEMS
from mrucombo.toolbar import ToolBar

logger = logging.getLogger(__name__)


class DemoWindow(QMainWindow):

    def __init__(self, max_items=DEFAULT_MAX_ITEMS, case_sensitive=False):
        super().__init__()
        self.setWindowTitle("MRU Combo Box")

        self.tools = ToolBar("History", self)
        self.addToolBar(self.tools)
        self.history = self.tools.add_mru_combo_box(max_items=max_items, case_sensitive=case_sensitive)

        self.clear_action = QAction("Clear", self)
        self.clear_action.triggered.connect(self.clear_history)
        self.tools.addAction(self.clear_action)

        self.label = QLabel("Type text and press Enter to remember it.")
        self.setCentralWidget(self.label)

        combo = self.history.combo_box
        combo.lineEdit().returnPressed.connect(self.remember_current_text)
        self.history.itemAdded.connect(lambda ev: self.report(f"Added: {ev.item}"))
        self.history.itemDeleted.connect(lambda ev: self.report(f"Deleted: {ev.item}"))

    def remember_current_text(self):
        self.history.add_mru_item(self.history.combo_box.currentText())

    def clear_history(self):
        self.history.items.clear()
        self.history.combo_box.clearEditText()
        self.report("History cleared")

    def report(self, message):
        logger.info(message)
        self.statusBar().showMessage(message, 3000)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="mrucombo", description=__doc__)
    parser.add_argument("--max-items", type=int, default=DEFAULT_MAX_ITEMS,
                        help="number of entries to keep; 0 or less keeps everything")
    parser.add_argument("--case-sensitive", action="store_true",
                        help="treat entries differing only in case as distinct")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    app = QApplication(sys.argv[:1])
    win = DemoWindow(max_items=args.max_items, case_sensitive=args.case_sensitive)
    win.show()
    return app.exec()
