import logging

from PyQt6 import sip
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QComboBox, QStyle

from mrucombo.controller import DEFAULT_MAX_ITEMS, MRUController
from mrucombo.delegate import DeleteIconDelegate
from mrucombo.items import ItemCollection
from mrucombo.popup_bridge import PopupReleaseBridge, resolve_popup_surface

logger = logging.getLogger(__name__)


class MRUComboBox(QComboBox):
    """Editable combo box keeping its entries in most-recently-used order.

    Every row of the drop-down carries a delete icon; clicking it removes
    the row and emits ``itemDeleted``. Selecting a row moves it to the top.
    """

    itemAdded = pyqtSignal(object)
    itemDeleted = pyqtSignal(object)

    def __init__(self, parent=None, max_items=DEFAULT_MAX_ITEMS, case_sensitive=False):
        super().__init__(parent)
        self._controller = MRUController(self, max_items, case_sensitive, parent=self)
        self._items = ItemCollection(self, self._controller.reordering)
        self._bridge = None
        self._watched_model = None

        self.setEditable(True)
        self.setInsertPolicy(QComboBox.InsertPolicy.NoInsert)

        icon = self.style().standardIcon(QStyle.StandardPixmap.SP_DialogCloseButton)
        self._delegate = DeleteIconDelegate(self._controller, icon, self)
        self.setItemDelegate(self._delegate)

        self._controller.itemAdded.connect(self.itemAdded)
        self._controller.itemDeleted.connect(self.itemDeleted)
        self.currentIndexChanged.connect(self._controller.promote)

        self._watch_model()
        self._attach_popup_bridge()

    @property
    def items(self):
        return self._items

    @property
    def controller(self):
        return self._controller

    @property
    def max_items(self):
        return self._controller.max_items

    @max_items.setter
    def max_items(self, value):
        self._controller.max_items = value

    @property
    def case_sensitive(self):
        return self._controller.case_sensitive

    @case_sensitive.setter
    def case_sensitive(self, value):
        self._controller.case_sensitive = value

    def add_mru_item(self, text):
        self._controller.add_mru_item(text)

    def delete_regions(self):
        return self._controller.delete_regions()

    def delete_icon(self):
        return self._delegate.icon()

    def set_delete_icon(self, icon):
        self._delegate.set_icon(icon)
        self.view().viewport().update()

    def popup_surface(self):
        return self._bridge.surface if self._bridge else None

    def setView(self, view):  # type: ignore
        super().setView(view)
        # A replacement view arrives with its own default delegate.
        self.setItemDelegate(self._delegate)
        self._attach_popup_bridge()

    def setModel(self, model):  # type: ignore
        super().setModel(model)
        self._watch_model()

    def _watch_model(self):
        model = self.model()
        if model is self._watched_model:
            return
        if self._watched_model is not None and not sip.isdeleted(self._watched_model):
            for signal in self._model_signals(self._watched_model):
                try:
                    signal.disconnect(self._controller.invalidate_delete_regions)
                except TypeError:
                    pass
        for signal in self._model_signals(model):
            signal.connect(self._controller.invalidate_delete_regions)
        self._watched_model = model
        self._controller.invalidate_delete_regions()

    @staticmethod
    def _model_signals(model):
        return (
            model.rowsInserted,
            model.rowsRemoved,
            model.rowsMoved,
            model.modelReset,
            model.layoutChanged,
        )

    def _attach_popup_bridge(self):
        if self._bridge is not None:
            self._bridge.detach()
            self._bridge.deleteLater()
            self._bridge = None

        surface = resolve_popup_surface(self)
        if surface is None:
            logger.debug("No popup list surface; delete icons are inactive")
            return

        self._bridge = PopupReleaseBridge(surface, self._controller.handle_pointer_release, self)
        logger.debug("Attached delete-icon bridge to %s", type(surface).__name__)
