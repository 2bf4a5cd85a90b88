"""Data table component for displaying lists of rows."""

import customtkinter as ctk
from typing import List, Dict, Any, Callable, Optional

from ..theme import Colors, Fonts, Spacing, Dimensions, get_status_color
from .selection import RowSelection


class DataTable(ctk.CTkScrollableFrame):
    """A scrollable table with single-row selection."""

    def __init__(
        self,
        master,
        columns: List[Dict[str, Any]],
        on_selection_change: Optional[Callable[[Optional[Dict]], None]] = None,
        **kwargs
    ):
        """
        Initialize the data table.

        Args:
            columns: List of column definitions with keys:
                - key: Data key for this column
                - title: Display title
                - width: Column width (optional)
                - render: Custom render function (optional)
            on_selection_change: Called with the selected row, or None when
                the selection is cleared
        """
        super().__init__(
            master,
            corner_radius=Dimensions.CARD_CORNER_RADIUS,
            fg_color=Colors.BG_CARD,
            **kwargs
        )

        self._columns = columns
        self._selection = RowSelection(on_selection_change)
        self._row_frames: List[ctk.CTkFrame] = []

        self._create_header()

    def _create_header(self):
        """Create the table header."""
        header_frame = ctk.CTkFrame(
            self,
            fg_color=Colors.BG_MEDIUM,
            corner_radius=0,
        )
        header_frame.pack(fill="x", pady=(0, 1))

        for col in self._columns:
            label = ctk.CTkLabel(
                header_frame,
                text=col["title"],
                font=Fonts.get("normal", "bold"),
                text_color=Colors.TEXT_SECONDARY,
                width=col.get("width", 150),
                anchor="w",
            )
            label.pack(side="left", padx=Spacing.PADDING_SMALL, pady=Spacing.PADDING_SMALL)

    def set_data(self, data: List[Dict]):
        """
        Replace the table data.

        Any selection is dropped and reported as a change to None.
        """
        for frame in self._row_frames:
            frame.destroy()
        self._row_frames.clear()

        for idx, row_data in enumerate(data):
            self._create_row(idx, row_data)

        self._selection.replace_rows(data)

    def _row_color(self, index: int) -> str:
        return Colors.BG_CARD if index % 2 == 0 else Colors.BG_LIGHT

    def _create_row(self, index: int, row_data: Dict):
        """Create a single data row."""
        row_frame = ctk.CTkFrame(
            self,
            fg_color=self._row_color(index),
            corner_radius=0,
        )
        row_frame.pack(fill="x", pady=(0, 1))
        row_frame.bind("<Button-1>", lambda e, i=index: self._on_click(i))

        for col in self._columns:
            value = row_data.get(col["key"], "")

            if "render" in col:
                widget = col["render"](row_frame, value, row_data)
            else:
                widget = ctk.CTkLabel(
                    row_frame,
                    text=str(value),
                    font=Fonts.get("normal"),
                    text_color=Colors.TEXT_PRIMARY,
                    width=col.get("width", 150),
                    anchor="w",
                )
            widget.pack(side="left", padx=Spacing.PADDING_SMALL, pady=Spacing.PADDING_SMALL)
            widget.bind("<Button-1>", lambda e, i=index: self._on_click(i))

        self._row_frames.append(row_frame)

    def _recolor(self, index: Optional[int]):
        if index is None or index >= len(self._row_frames):
            return
        if index == self._selection.index:
            color = Colors.PRIMARY_HOVER
        else:
            color = self._row_color(index)
        self._row_frames[index].configure(fg_color=color)

    def _on_click(self, index: int):
        """Handle row click. Clicking the selected row deselects it."""
        previous = self._selection.index
        self._selection.toggle(index)
        self._recolor(previous)
        self._recolor(self._selection.index)

    def clear_selection(self):
        """Deselect the current row, if any."""
        previous = self._selection.index
        self._selection.clear()
        self._recolor(previous)


class StatusBadge(ctk.CTkFrame):
    """A colored badge for displaying status."""

    def __init__(
        self,
        master,
        text: str,
        color: str = Colors.PRIMARY,
        **kwargs
    ):
        super().__init__(
            master,
            corner_radius=4,
            fg_color=color,
            **kwargs
        )

        label = ctk.CTkLabel(
            self,
            text=text,
            font=Fonts.get("small"),
            text_color=Colors.TEXT_PRIMARY,
        )
        label.pack(padx=Spacing.PADDING_SMALL, pady=2)


def render_status_badge(parent, value, row_data):
    """Render a status name as a colored badge."""
    return StatusBadge(parent, text=str(value), color=get_status_color(str(value)))
