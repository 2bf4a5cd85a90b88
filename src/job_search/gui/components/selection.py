"""Single-row selection bookkeeping for tables."""

from typing import Any, Callable, Dict, List, Optional


class RowSelection:
    """
    Tracks which row of a table is selected.

    ``on_change`` is called with the newly selected row, or with None when
    the selection is dropped. Replacing the rows while something is
    selected counts as dropping it.
    """

    def __init__(self, on_change: Optional[Callable[[Optional[Dict]], None]] = None):
        self._on_change = on_change
        self.rows: List[Dict[str, Any]] = []
        self.index: Optional[int] = None

    @property
    def selected(self) -> Optional[Dict[str, Any]]:
        if self.index is None:
            return None
        return self.rows[self.index]

    def _notify(self, row: Optional[Dict]):
        if self._on_change:
            self._on_change(row)

    def replace_rows(self, rows: List[Dict[str, Any]]):
        had_selection = self.index is not None
        self.rows = rows
        self.index = None
        if had_selection:
            self._notify(None)

    def toggle(self, index: int):
        """Select the row at ``index``; clicking the selected row deselects it."""
        if index == self.index:
            self.clear()
            return
        if not 0 <= index < len(self.rows):
            return
        self.index = index
        self._notify(self.rows[index])

    def clear(self):
        if self.index is None:
            return
        self.index = None
        self._notify(None)
