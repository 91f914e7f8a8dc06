__version_info__ = ("0", "1", "0")
__version__ = ".".join(__version_info__)

from mrucombo.controller import DEFAULT_MAX_ITEMS, MRUController, MRUItemEvent
from mrucombo.combobox import MRUComboBox
from mrucombo.items import ItemCollection
from mrucombo.toolbar import ToolBar, ToolBarMRUComboBox

__all__ = [
    "DEFAULT_MAX_ITEMS",
    "ItemCollection",
    "MRUComboBox",
    "MRUController",
    "MRUItemEvent",
    "ToolBar",
    "ToolBarMRUComboBox",
]
