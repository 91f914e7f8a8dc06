"""Pointer-release interception on the open drop-down list.

QComboBox does not report clicks inside its popup list, so the bridge
filters the events of the list view's viewport directly and forwards left
button releases, in viewport coordinates, to a callback.
"""

import logging

from PyQt6 import sip
from PyQt6.QtCore import QEvent, QObject, Qt

logger = logging.getLogger(__name__)


def _alive(obj):
    return obj is not None and not sip.isdeleted(obj)


def resolve_popup_surface(combo):
    """Return the widget that receives mouse events for the popup list.

    None when the combo box has no usable list view.
    """
    view = combo.view()
    if not _alive(view):
        return None
    viewport = view.viewport()
    if not _alive(viewport):
        return None
    return viewport


class PopupReleaseBridge(QObject):
    """Event filter forwarding left-button releases on ``surface``.

    ``on_release(pos)`` receives a ``QPoint`` local to the surface. When it
    returns True the release is consumed; every other event passes through.
    """

    def __init__(self, surface, on_release, parent=None):
        super().__init__(parent)
        self._surface = surface
        self._on_release = on_release
        surface.installEventFilter(self)

    @property
    def surface(self):
        return self._surface if _alive(self._surface) else None

    def detach(self):
        if _alive(self._surface):
            self._surface.removeEventFilter(self)
        self._surface = None

    def eventFilter(self, obj, event):
        if (
            obj is self._surface
            and event.type() == QEvent.Type.MouseButtonRelease
            and event.button() == Qt.MouseButton.LeftButton
        ):
            pos = event.position().toPoint()
            if self._on_release(pos):
                return True
        return super().eventFilter(obj, event)
