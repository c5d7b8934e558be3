"""List model that binds a collection of objects to a Qt item view.

CountryListModel plays the role of a binding source: it holds a data
source (any list of objects) and exposes one attribute of each item,
the display member, as the text shown by the view. The item itself is
available through Qt.ItemDataRole.UserRole so selection handlers can
read the bound object back.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, QPersistentModelIndex, Qt


class CountryListModel(QAbstractListModel):
    """Read-only list model over a collection of country objects."""

    def __init__(self, display_member: str, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.display_member = display_member
        self._items: list[Any] = []

    @property
    def data_source(self) -> list[Any]:
        return list(self._items)

    def set_data_source(self, items: Iterable[Any] | None) -> None:
        """Replace the bound collection and reset attached views."""
        new_items = list(items) if items is not None else []
        for item in new_items:
            # Fail at populate time rather than on first paint
            if not hasattr(item, self.display_member):
                raise AttributeError(
                    f"{type(item).__name__} has no display member {self.display_member!r}"
                )
        self.beginResetModel()
        self._items = new_items
        self.endResetModel()

    def item_at(self, row: int) -> Any | None:
        if 0 <= row < len(self._items):
            return self._items[row]
        return None

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:  # noqa: B008
        if parent.isValid():
            return 0
        return len(self._items)

    def data(
        self,
        index: QModelIndex | QPersistentModelIndex,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> Any:
        if not index.isValid():
            return None
        item = self.item_at(index.row())
        if item is None:
            return None
        if role == Qt.ItemDataRole.DisplayRole:
            return str(getattr(item, self.display_member))
        if role == Qt.ItemDataRole.ToolTipRole:
            return f"Key: {item.id}"
        if role == Qt.ItemDataRole.UserRole:
            return item
        return None
