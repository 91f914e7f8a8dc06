from PyQt6.QtCore import QRect, QSize, Qt
from PyQt6.QtGui import QPalette
from PyQt6.QtWidgets import QApplication, QStyle, QStyledItemDelegate, QStyleOptionViewItem

DELETE_ICON_SIZE = 12
DELETE_ICON_VERTICAL_PADDING = 2


class DeleteIconDelegate(QStyledItemDelegate):
    """Draws each popup row as left-aligned text plus a trailing delete icon.

    The icon occupies a square one row-height wide at the right edge of the
    row. Its rectangle is reported to the controller so a later click can
    be matched back to the row.
    """

    def __init__(self, controller, icon, parent=None):
        super().__init__(parent)
        self._controller = controller
        self._icon = icon

    def icon(self):
        return self._icon

    def set_icon(self, icon):
        self._icon = icon

    def sizeHint(self, option, index):
        size = super().sizeHint(option, index)
        min_height = DELETE_ICON_SIZE + 2 * DELETE_ICON_VERTICAL_PADDING
        return QSize(size.width(), max(size.height(), min_height))

    def paint(self, painter, option, index):
        row = index.row()
        if not index.isValid() or row < 0 or row >= index.model().rowCount(index.parent()):
            return

        opt = QStyleOptionViewItem(option)
        self.initStyleOption(opt, index)
        widget = opt.widget
        style = widget.style() if widget is not None else QApplication.style()

        painter.save()
        style.drawPrimitive(QStyle.PrimitiveElement.PE_PanelItemViewItem, opt, painter, widget)

        bounds = QRect(opt.rect)
        text_rect = bounds.adjusted(0, 0, -bounds.height(), 0)

        selected = bool(opt.state & QStyle.StateFlag.State_Selected)
        role = QPalette.ColorRole.HighlightedText if selected else QPalette.ColorRole.Text
        painter.setPen(opt.palette.color(role))
        painter.setFont(opt.font)
        text = str(index.data(Qt.ItemDataRole.DisplayRole) or "")
        elided = opt.fontMetrics.elidedText(text, Qt.TextElideMode.ElideRight, text_rect.width())
        painter.drawText(
            text_rect,
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
            elided,
        )

        delete_rect = QRect(
            text_rect.x() + text_rect.width(),
            bounds.y() + DELETE_ICON_VERTICAL_PADDING,
            DELETE_ICON_SIZE,
            DELETE_ICON_SIZE,
        )
        if self._icon is not None and not self._icon.isNull():
            self._icon.paint(painter, delete_rect)
        painter.restore()

        self._controller.record_delete_region(row, delete_rect)
