"""Main Textual app class."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from dinner_chooser.add_dish_modal import AddDishModal
from dinner_chooser.confirm_modal import ConfirmModal
from dinner_chooser.errors import DinnerChooserError, ValidationError
from dinner_chooser.rendering import format_dish_list, format_mood_bar, format_selection
from dinner_chooser.session import DinnerSession

logger = logging.getLogger(__name__)


class DinnerChooserApp(App):
    """A Textual app that picks tonight's dinner from a mood level."""

    TITLE = "Dinner Chooser"
    SUB_TITLE = "What are we cooking tonight?"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #picker-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #dishes-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #mood-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 5;
    }

    #result {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status {
        height: 3;
        padding: 0 1;
        color: $text-muted;
    }

    #dishes-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+r", "reset_dishes", "Reset list", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: DinnerSession) -> None:
        super().__init__()
        self.session = session
        self.dish_selected_index: int | None = None
        self.show_dishes = True
        self.system_status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="picker-pane"):
                yield Static("Cooking mood", classes="pane-title")
                yield Static(id="mood-bar")
                yield Static(id="result")
                yield Static(id="status")
            with Vertical(id="dishes-pane"):
                yield Static(id="dishes-title", classes="pane-title")
                yield Static("(list is empty)", id="dishes-list")

    def on_mount(self) -> None:
        if not self.session.loaded:
            warning = self.session.load()
            if warning:
                self.system_status = warning
        if self.session.dishes:
            self.dish_selected_index = 0
        logger.debug("on_mount dishes=%s status=%r", len(self.session.dishes), self.system_status)
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return

        if event.key in {"enter", "space"}:
            self.action_choose_dinner()
            event.stop()
            return

        if event.key in {"up", "down"}:
            self._move_dish_selection(-1 if event.key == "up" else 1)
            event.stop()
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key in {"1", "2", "3", "4", "5"}:
            self.session.set_mood(int(key))
            self._refresh_mood()
            event.stop()
            return

        if key == "c":
            self.action_choose_dinner()
        elif key == "j":
            self._move_dish_selection(1)
        elif key == "k":
            self._move_dish_selection(-1)
        elif key == "a":
            self.action_add_dish()
        elif key == "d":
            self.action_remove_selected()
        elif key == "l":
            self.action_toggle_dish_list()
        else:
            return
        event.stop()

    def action_choose_dinner(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        try:
            self.session.choose_dinner()
        except DinnerChooserError as exc:
            self._set_status(str(exc))
            return
        self._set_status("")
        self._refresh_result()

    def action_add_dish(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.push_screen(AddDishModal(on_submit=self._submit_new_dish))

    def action_remove_selected(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if not self.show_dishes:
            self._set_status("Show the list (L) to pick a dish to remove")
            return
        dish = self._selected_dish_name()
        if dish is None:
            self._set_status("Nothing selected to remove")
            return

        index = self.dish_selected_index
        self.push_screen(
            ConfirmModal("Remove dish", f'Are you sure you want to remove "{dish}"?'),
            lambda confirmed: self._remove_confirmed(index, confirmed),
        )

    def action_toggle_dish_list(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.show_dishes = not self.show_dishes
        try:
            self.query_one("#dishes-pane", Vertical).display = self.show_dishes
        except NoMatches:
            return
        self._refresh_dishes()

    def action_reset_dishes(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.push_screen(
            ConfirmModal("Reset list", "Restore the default dish list? Current changes will be lost."),
            self._reset_confirmed,
        )

    def _submit_new_dish(self, name: str, difficulties: list[int]) -> str | None:
        try:
            warning = self.session.add_dish(name, difficulties)
        except ValidationError as exc:
            return str(exc)

        self.dish_selected_index = len(self.session.dishes) - 1
        self._set_status(warning or f"Added {self.session.dishes[-1].name}")
        self._refresh_dishes()
        return None

    def _remove_confirmed(self, index: int | None, confirmed: bool | None) -> None:
        if not confirmed or index is None:
            return
        try:
            warning = self.session.remove_dish(index)
        except DinnerChooserError as exc:
            self._set_status(str(exc))
            return

        if not self.session.dishes:
            self.dish_selected_index = None
        else:
            self.dish_selected_index = min(index, len(self.session.dishes) - 1)
        self._set_status(warning or "Dish removed")
        self._refresh_dishes()

    def _reset_confirmed(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        warning = self.session.reset_dishes()
        self.dish_selected_index = 0
        self._set_status(warning or "Default list restored")
        self._refresh_dishes()

    def _selected_dish_name(self) -> str | None:
        if self.dish_selected_index is None:
            return None
        if not (0 <= self.dish_selected_index < len(self.session.dishes)):
            return None
        return self.session.dishes[self.dish_selected_index].name

    def _move_dish_selection(self, delta: int) -> None:
        dishes = self.session.dishes
        if not dishes or not self.show_dishes:
            return

        current = self.dish_selected_index
        if current is None:
            current = -1 if delta > 0 else 0
        self.dish_selected_index = (current + delta) % len(dishes)
        self._refresh_dishes()

    def _set_status(self, message: str) -> None:
        self.system_status = message
        self._refresh_status()

    def _refresh_all(self) -> None:
        self._refresh_mood()
        self._refresh_result()
        self._refresh_status()
        self._refresh_dishes()

    def _refresh_mood(self) -> None:
        try:
            self.query_one("#mood-bar", Static).update(format_mood_bar(self.session.mood))
        except NoMatches:
            return

    def _refresh_result(self) -> None:
        try:
            self.query_one("#result", Static).update(format_selection(self.session.last_selection))
        except NoMatches:
            return

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        bar.update(f"{status}\nC/Enter choose. A add, D remove, L show/hide list, Ctrl+R reset, Ctrl+Q quit.")

    def _refresh_dishes(self) -> None:
        try:
            title_widget = self.query_one("#dishes-title", Static)
            dishes_widget = self.query_one("#dishes-list", Static)
        except NoMatches:
            return

        dishes = self.session.dishes
        title_widget.update(f"Dishes ({len(dishes)})")
        if not dishes:
            self.dish_selected_index = None
            dishes_widget.update("(list is empty)")
            return

        if self.dish_selected_index is not None and self.dish_selected_index >= len(dishes):
            self.dish_selected_index = len(dishes) - 1

        # Unlaid-out widgets report zero height.
        rows = dishes_widget.size.height or 8
        dishes_widget.update(format_dish_list(dishes, self.dish_selected_index, rows))
