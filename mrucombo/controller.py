"""Most-recently-used list management for an owner-drawn combo box.

The controller never touches Qt widgets directly. It works against a host
object that provides:

* ``items`` - an ordered collection with ``__len__``, ``__getitem__``,
  ``insert(index, text)`` and ``remove_at(index)``
* ``setCurrentIndex(index)`` / ``setEditText(text)`` / ``setFocus()``

``MRUComboBox`` is the real host; the tests drive the controller with a
plain Python fake.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, List, Protocol

from PyQt6.QtCore import QObject, QPoint, QRect, pyqtSignal

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITEMS = 10


@dataclass(frozen=True)
class MRUItemEvent:
    """Text of the item that was added or deleted."""

    item: str


class MRUHost(Protocol):
    items: object

    def setCurrentIndex(self, index: int) -> None: ...

    def setEditText(self, text: str) -> None: ...

    def setFocus(self) -> None: ...


def same_item(left: str, right: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return left == right
    return left.casefold() == right.casefold()


class MRUController(QObject):
    itemAdded = pyqtSignal(object)
    itemDeleted = pyqtSignal(object)

    def __init__(
        self,
        host: MRUHost,
        max_items: int = DEFAULT_MAX_ITEMS,
        case_sensitive: bool = False,
        parent=None,
    ):
        super().__init__(parent)
        self._host = host
        self._max_items = int(max_items)
        self._case_sensitive = bool(case_sensitive)
        # row -> delete icon rectangle, in popup viewport coordinates
        self._delete_regions: Dict[int, QRect] = {}
        self._reordering = False

    # Configuration ------------------------------------------------------
    @property
    def max_items(self) -> int:
        return self._max_items

    @max_items.setter
    def max_items(self, value: int) -> None:
        self._max_items = int(value)

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @case_sensitive.setter
    def case_sensitive(self, value: bool) -> None:
        self._case_sensitive = bool(value)

    @property
    def is_reordering(self) -> bool:
        return self._reordering

    @contextmanager
    def reordering(self):
        """Suppress promotion while the item store is being mutated.

        Nested use restores the outer state on exit.
        """
        previous = self._reordering
        self._reordering = True
        try:
            yield
        finally:
            self._reordering = previous

    # Item store ---------------------------------------------------------
    def add_mru_item(self, text) -> None:
        if text is None:
            return
        text = text if isinstance(text, str) else str(text)
        if not text:
            return

        items = self._host.items
        with self.reordering():
            for i in range(len(items) - 1, -1, -1):
                if same_item(items[i], text, self._case_sensitive):
                    items.remove_at(i)

            items.insert(0, text)

            while self._max_items > 0 and len(items) > self._max_items:
                last = len(items) - 1
                logger.debug("Evicting MRU item %r", items[last])
                items.remove_at(last)

            self._host.setCurrentIndex(0)
            self._host.setEditText(text)

        logger.debug("Added MRU item %r (%d items)", text, len(items))
        self.itemAdded.emit(MRUItemEvent(text))

    def promote(self, index: int) -> None:
        """Move the row selected at ``index`` to the top of the list."""
        if self._reordering:
            return
        items = self._host.items
        if index <= 0 or index >= len(items):
            return

        item = items[index]
        with self.reordering():
            items.remove_at(index)
            items.insert(0, item)
            self._host.setCurrentIndex(0)
        logger.debug("Promoted MRU item %r from row %d", item, index)

    # Delete affordance --------------------------------------------------
    def delete_regions(self) -> Dict[int, QRect]:
        return dict(self._delete_regions)

    def record_delete_region(self, row: int, rect: QRect) -> None:
        self._delete_regions[row] = QRect(rect)

    def invalidate_delete_regions(self, *args) -> None:
        self._delete_regions.clear()

    def rows_at(self, pos: QPoint) -> List[int]:
        """Rows whose delete icon contains ``pos``, highest row first."""
        count = len(self._host.items)
        rows = [
            row
            for row, rect in self._delete_regions.items()
            if row < count and rect.contains(pos)
        ]
        rows.sort(reverse=True)
        return rows

    def handle_pointer_release(self, pos: QPoint) -> bool:
        """Delete every row whose delete icon was clicked.

        Returns True when at least one row was removed.
        """
        rows = self.rows_at(pos)
        if not rows:
            return False

        items = self._host.items
        # Highest row first; earlier removals would shift the later rows.
        for row in rows:
            text = items[row]
            with self.reordering():
                items.remove_at(row)
            self._delete_regions.pop(row, None)
            logger.debug("Deleted MRU item %r at row %d", text, row)
            if text is not None:
                self.itemDeleted.emit(MRUItemEvent(text))

        self._host.setFocus()
        return True
