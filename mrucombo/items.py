from contextlib import nullcontext


class ItemCollection:
    """Ordered, index-addressable view over the rows of a QComboBox.

    Items are stored as display text: anything that is not already a
    ``str`` is converted with ``str()`` on the way in. ``None`` is
    rejected with ``TypeError``.
    """

    def __init__(self, combo, guard=None):
        self._combo = combo
        self._guard = guard or nullcontext

    @staticmethod
    def _to_text(item):
        if item is None:
            raise TypeError("item must not be None")
        return item if isinstance(item, str) else str(item)

    def _check_index(self, index, allow_end=False):
        count = self._combo.count()
        if index < 0:
            index += count
        if not 0 <= index < count + int(allow_end):
            raise IndexError(f"item index {index} out of range")
        return index

    def __len__(self):
        return self._combo.count()

    def __getitem__(self, index):
        return self._combo.itemText(self._check_index(index))

    def __iter__(self):
        for i in range(self._combo.count()):
            yield self._combo.itemText(i)

    def __contains__(self, item):
        return item is not None and self.index_of(item) >= 0

    def __repr__(self):
        return f"ItemCollection({list(self)!r})"

    def add(self, item):
        text = self._to_text(item)
        with self._guard():
            self._combo.addItem(text)
        return self._combo.count() - 1

    def extend(self, items):
        texts = [self._to_text(item) for item in items]
        with self._guard():
            self._combo.addItems(texts)

    def insert(self, index, item):
        text = self._to_text(item)
        index = self._check_index(index, allow_end=True)
        with self._guard():
            self._combo.insertItem(index, text)

    def remove_at(self, index):
        index = self._check_index(index)
        with self._guard():
            self._combo.removeItem(index)

    def clear(self):
        with self._guard():
            self._combo.clear()

    def index_of(self, item):
        if item is None:
            return -1
        text = self._to_text(item)
        for i in range(self._combo.count()):
            if self._combo.itemText(i) == text:
                return i
        return -1
