"""Main application window for Job Search."""

import logging
import customtkinter as ctk
from typing import Optional

from .theme import Colors, Fonts, Spacing, Dimensions
from .components.data_table import DataTable, render_status_badge
from .controller import FormController

logger = logging.getLogger(__name__)

TAB_NAMES = ["Roles", "Companies"]


class JobSearchApp(ctk.CTk):
    """Main application window."""

    def __init__(self, controller: Optional[FormController] = None):
        super().__init__()

        self.title("Job Search")
        self.geometry(f"{Dimensions.WINDOW_DEFAULT_WIDTH}x{Dimensions.WINDOW_DEFAULT_HEIGHT}")
        self.minsize(Dimensions.WINDOW_MIN_WIDTH, Dimensions.WINDOW_MIN_HEIGHT)

        self._controller = controller or FormController()

        self._create_layout()

        self._controller.load()
        self._refresh_companies()
        self._refresh_statuses()
        self._refresh_roles()
        self._sync_form()

    def _create_layout(self):
        """Create the main application layout."""
        self._tabview = ctk.CTkTabview(self, fg_color=Colors.BG_DARK)
        self._tabview.pack(fill="both", expand=True, padx=Spacing.PADDING_NORMAL, pady=Spacing.PADDING_NORMAL)

        self._create_roles_tab(self._tabview.add(TAB_NAMES[0]))
        self._create_companies_tab(self._tabview.add(TAB_NAMES[1]))
        self._tabview.set(TAB_NAMES[0])

        # Status line for unexpected errors
        self._error_label = ctk.CTkLabel(
            self,
            text="",
            font=Fonts.get("small"),
            text_color=Colors.DANGER,
        )
        self._error_label.pack(anchor="w", padx=Spacing.PADDING_LARGE, pady=(0, Spacing.PADDING_SMALL))

    # =========================================================================
    # Roles tab
    # =========================================================================

    def _create_roles_tab(self, tab):
        form = ctk.CTkFrame(tab, fg_color="transparent")
        form.pack(fill="x", padx=Spacing.PADDING_NORMAL, pady=Spacing.PADDING_NORMAL)
        form.grid_columnconfigure(1, weight=1)
        form.grid_columnconfigure(3, weight=1)

        self._add_label(form, "Company", row=0, column=0)
        self._company_menu = ctk.CTkOptionMenu(
            form,
            values=[],
            font=Fonts.get("normal"),
            fg_color=Colors.BG_CARD,
            button_color=Colors.PRIMARY,
            height=Dimensions.INPUT_HEIGHT,
            command=self._on_company_change,
        )
        self._company_menu.grid(row=0, column=1, sticky="ew", padx=Spacing.PADDING_SMALL, pady=Spacing.PADDING_SMALL)

        self._add_label(form, "Status", row=0, column=2)
        self._status_menu = ctk.CTkOptionMenu(
            form,
            values=[],
            font=Fonts.get("normal"),
            fg_color=Colors.BG_CARD,
            button_color=Colors.PRIMARY,
            height=Dimensions.INPUT_HEIGHT,
            command=self._on_status_change,
        )
        self._status_menu.grid(row=0, column=3, sticky="ew", padx=Spacing.PADDING_SMALL, pady=Spacing.PADDING_SMALL)

        self._add_label(form, "Role", row=1, column=0)
        self._role_entry = ctk.CTkEntry(
            form,
            font=Fonts.get("normal"),
            height=Dimensions.INPUT_HEIGHT,
            corner_radius=Dimensions.INPUT_CORNER_RADIUS,
        )
        self._role_entry.grid(row=1, column=1, columnspan=3, sticky="ew", padx=Spacing.PADDING_SMALL, pady=Spacing.PADDING_SMALL)

        self._add_label(form, "Notes", row=2, column=0)
        self._notes_text = ctk.CTkTextbox(
            form,
            font=Fonts.get("normal"),
            height=Dimensions.NOTES_HEIGHT,
            corner_radius=Dimensions.INPUT_CORNER_RADIUS,
        )
        self._notes_text.grid(row=2, column=1, columnspan=3, sticky="ew", padx=Spacing.PADDING_SMALL, pady=Spacing.PADDING_SMALL)

        buttons = ctk.CTkFrame(form, fg_color="transparent")
        buttons.grid(row=3, column=0, columnspan=4, sticky="e", pady=(Spacing.PADDING_SMALL, 0))

        self._clear_btn = self._add_button(buttons, "Clear Selection", self._on_clear_click, primary=False)
        self._update_btn = self._add_button(buttons, "Update Role", self._on_update_role_click)
        self._add_btn = self._add_button(buttons, "Add Role", self._on_add_role_click)

        self._roles_table = DataTable(
            tab,
            columns=[
                {"key": "role_name", "title": "Role", "width": 220},
                {"key": "company_name", "title": "Company", "width": 160},
                {"key": "status_name", "title": "Status", "width": 110, "render": render_status_badge},
                {"key": "notes", "title": "Notes", "width": 260},
                {"key": "created", "title": "Created", "width": 130},
                {"key": "modified", "title": "Modified", "width": 130},
            ],
            on_selection_change=self._on_role_selection_change,
        )
        self._roles_table.pack(fill="both", expand=True, padx=Spacing.PADDING_NORMAL, pady=Spacing.PADDING_NORMAL)

    # =========================================================================
    # Companies tab
    # =========================================================================

    def _create_companies_tab(self, tab):
        form = ctk.CTkFrame(tab, fg_color="transparent")
        form.pack(fill="x", padx=Spacing.PADDING_NORMAL, pady=Spacing.PADDING_NORMAL)

        self._company_entry = ctk.CTkEntry(
            form,
            font=Fonts.get("normal"),
            height=Dimensions.INPUT_HEIGHT,
            corner_radius=Dimensions.INPUT_CORNER_RADIUS,
            placeholder_text="Company name",
            width=300,
        )
        self._company_entry.pack(side="left")
        self._company_entry.bind("<Return>", lambda e: self._on_add_company_click())

        self._add_button(form, "Add Company", self._on_add_company_click, side="left")

        self._companies_table = DataTable(
            tab,
            columns=[
                {"key": "id", "title": "ID", "width": 60},
                {"key": "name", "title": "Name", "width": 300},
            ],
        )
        self._companies_table.pack(fill="both", expand=True, padx=Spacing.PADDING_NORMAL, pady=Spacing.PADDING_NORMAL)

    # =========================================================================
    # Widget helpers
    # =========================================================================

    def _add_label(self, parent, text: str, row: int, column: int):
        ctk.CTkLabel(
            parent,
            text=text,
            font=Fonts.get("small"),
            text_color=Colors.TEXT_MUTED,
        ).grid(row=row, column=column, sticky="w", padx=Spacing.PADDING_SMALL)

    def _add_button(self, parent, text: str, command, primary: bool = True, side: str = "right"):
        button = ctk.CTkButton(
            parent,
            text=text,
            font=Fonts.get("normal"),
            fg_color=Colors.PRIMARY if primary else "transparent",
            hover_color=Colors.PRIMARY_HOVER if primary else Colors.BG_LIGHT,
            text_color=Colors.TEXT_PRIMARY if primary else Colors.TEXT_SECONDARY,
            height=Dimensions.BUTTON_HEIGHT,
            corner_radius=Dimensions.BUTTON_CORNER_RADIUS,
            command=command,
        )
        button.pack(side=side, padx=Spacing.PADDING_SMALL)
        return button

    def _set_entry_text(self, entry: ctk.CTkEntry, text: str, editable: bool = True):
        entry.configure(state="normal")
        entry.delete(0, "end")
        entry.insert(0, text)
        entry.configure(state="normal" if editable else "disabled")

    def _selected_company_id(self) -> Optional[int]:
        item = self._controller.companies.find(self._company_menu.get())
        return item.id if item else None

    def _selected_status_id(self) -> Optional[int]:
        status = self._controller.find_status(self._status_menu.get())
        return status.id if status else None

    # =========================================================================
    # Refresh
    # =========================================================================

    def _refresh_companies(self):
        projection = self._controller.companies
        self._companies_table.set_data([c.model_dump() for c in projection.rows])
        self._company_menu.configure(values=[item.name for item in projection.lookup])

    def _refresh_statuses(self):
        self._status_menu.configure(values=[s.name for s in self._controller.statuses])

    def _refresh_roles(self):
        self._roles_table.set_data([r.model_dump() for r in self._controller.roles])

    def _sync_form(self):
        """Mirror the controller's fields and mode onto the widgets."""
        controller = self._controller
        fields = controller.fields

        company = next(
            (item for item in controller.companies.lookup if item.id == fields.company_id), None
        )
        self._company_menu.set(company.name if company else "")

        status = controller.get_status(fields.status_id)
        self._status_menu.set(status.name if status else "")

        self._set_entry_text(self._role_entry, fields.role_name, controller.role_name_editable)
        self._notes_text.delete("1.0", "end")
        self._notes_text.insert("1.0", fields.notes)

        self._add_btn.configure(state="normal" if controller.can_add_role else "disabled")
        self._update_btn.configure(state="normal" if controller.can_update_role else "disabled")

    # =========================================================================
    # Event handlers
    # =========================================================================

    def _on_company_change(self, name: str):
        self._controller.select_company(self._selected_company_id())

    def _on_status_change(self, name: str):
        self._controller.select_status(self._selected_status_id())
        self._update_btn.configure(
            state="normal" if self._controller.can_update_role else "disabled"
        )

    def _on_role_selection_change(self, row):
        self._controller.select_role(row["id"] if row else None)
        self._sync_form()

    def _on_clear_click(self):
        self._roles_table.clear_selection()

    def _on_add_company_click(self):
        if not self._controller.add_company(self._company_entry.get()):
            return
        self._company_entry.delete(0, "end")
        self._refresh_companies()
        self._tabview.set(TAB_NAMES[self._controller.active_tab])
        self._sync_form()

    def _on_add_role_click(self):
        added = self._controller.add_role(
            company_id=self._selected_company_id(),
            status_id=self._selected_status_id(),
            role_name=self._role_entry.get(),
            notes=self._notes_text.get("1.0", "end-1c"),
        )
        if not added:
            return
        self._refresh_roles()
        self._sync_form()

    def _on_update_role_click(self):
        updated = self._controller.update_role(
            status_id=self._selected_status_id(),
            notes=self._notes_text.get("1.0", "end-1c"),
        )
        if not updated:
            return
        self._sync_form()
        # Reloading drops the table selection, which returns the form to add mode
        self._refresh_roles()

    # =========================================================================
    # Errors
    # =========================================================================

    def report_callback_exception(self, exc, val, tb):
        """Log errors raised in event handlers and show a generic message."""
        logger.error("Unhandled error in event handler", exc_info=(exc, val, tb))
        self._error_label.configure(text=f"Error: {val}. See the log for details.")


def run_app(controller: Optional[FormController] = None):
    """Run the Job Search application."""
    app = JobSearchApp(controller)
    app.mainloop()
