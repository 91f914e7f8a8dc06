from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QToolBar, QWidgetAction

from mrucombo.combobox import MRUComboBox
from mrucombo.controller import DEFAULT_MAX_ITEMS


class ToolBarMRUComboBox(QWidgetAction):
    """Toolbar action hosting exactly one MRUComboBox."""

    itemAdded = pyqtSignal(object)
    itemDeleted = pyqtSignal(object)

    def __init__(self, parent=None, max_items=DEFAULT_MAX_ITEMS, case_sensitive=False):
        super().__init__(parent)
        combo = MRUComboBox(max_items=max_items, case_sensitive=case_sensitive)
        combo.itemAdded.connect(self.itemAdded)
        combo.itemDeleted.connect(self.itemDeleted)
        # The action takes ownership of its default widget.
        self.setDefaultWidget(combo)
        self._combo = combo

    @property
    def combo_box(self):
        return self._combo

    @property
    def items(self):
        return self._combo.items

    @property
    def max_items(self):
        return self._combo.max_items

    @max_items.setter
    def max_items(self, value):
        self._combo.max_items = value

    @property
    def case_sensitive(self):
        return self._combo.case_sensitive

    @case_sensitive.setter
    def case_sensitive(self, value):
        self._combo.case_sensitive = value

    def add_mru_item(self, text):
        self._combo.add_mru_item(text)


class ToolBar(QToolBar):

    def __init__(self, title, parent=None):
        super(ToolBar, self).__init__(title, parent)
        m = (0, 0, 0, 0)
        self.setContentsMargins(*m)
        self.setStyleSheet("QToolBar { spacing: 2px; }")
        self.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)

    def add_mru_combo_box(self, max_items=DEFAULT_MAX_ITEMS, case_sensitive=False, min_width=200):
        action = ToolBarMRUComboBox(self, max_items=max_items, case_sensitive=case_sensitive)
        action.combo_box.setMinimumWidth(min_width)
        self.addAction(action)
        return action
