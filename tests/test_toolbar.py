from PyQt6.QtWidgets import QMainWindow

from mrucombo.combobox import MRUComboBox
from mrucombo.toolbar import ToolBar, ToolBarMRUComboBox


def test_action_owns_one_combo(qtbot):
    action = ToolBarMRUComboBox(max_items=4, case_sensitive=True)
    assert isinstance(action.combo_box, MRUComboBox)
    assert action.defaultWidget() is action.combo_box
    assert action.max_items == 4
    assert action.case_sensitive is True


def test_action_forwards_configuration_and_items(qtbot):
    action = ToolBarMRUComboBox()
    action.max_items = 2
    action.case_sensitive = True
    assert action.combo_box.max_items == 2
    assert action.combo_box.case_sensitive is True

    for text in ("a", "b", "c"):
        action.add_mru_item(text)
    assert list(action.items) == ["c", "b"]
    assert action.items is action.combo_box.items


def test_action_reemits_notifications(qtbot):
    action = ToolBarMRUComboBox()
    added = []
    action.itemAdded.connect(added.append)
    with qtbot.waitSignal(action.itemAdded):
        action.add_mru_item("x")
    assert [ev.item for ev in added] == ["x"]


def test_toolbar_hosts_combo(qtbot):
    window = QMainWindow()
    qtbot.addWidget(window)
    toolbar = ToolBar("History", window)
    window.addToolBar(toolbar)

    action = toolbar.add_mru_combo_box(max_items=5, min_width=150)

    assert action in toolbar.actions()
    assert toolbar.widgetForAction(action) is action.combo_box
    assert action.combo_box.minimumWidth() == 150
    assert action.max_items == 5
