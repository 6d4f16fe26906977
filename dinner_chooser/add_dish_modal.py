"""Add-dish form modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from dinner_chooser.constant import MAX_LEVEL, MIN_LEVEL
from dinner_chooser.rendering import badge_style

SubmitHandler = Callable[[str, list[int]], str | None]


class AddDishModal(ModalScreen[bool]):
    """Collect a dish name and its difficulty categories.

    ``on_submit`` receives the typed name and the toggled categories and
    returns an error message to keep the form open, or ``None`` to close it.
    """

    CSS = """
    AddDishModal {
        align: center middle;
        background: $background 60%;
    }

    #add-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #add-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #add-body {
        margin-bottom: 1;
        color: white;
    }

    #add-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #add-help {
        color: #dddddd;
    }
    """

    _NAME_FIELD = "name"
    _DIFFICULTY_FIELD = "difficulties"

    def __init__(self, on_submit: SubmitHandler) -> None:
        super().__init__()
        self.on_submit = on_submit
        self.name_value = ""
        self.selected_difficulties: list[int] = []
        self.active_field = self._NAME_FIELD
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="add-dialog"):
            yield Static("Add dish", id="add-title")
            yield Static(id="add-body")
            yield Static(id="add-error")
            yield Static(id="add-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        event.stop()

        if event.key == "escape":
            self.dismiss(False)
            return

        if event.key == "enter":
            self._confirm()
            return

        if event.key in {"tab", "shift+tab"}:
            self.active_field = self._DIFFICULTY_FIELD if self.active_field == self._NAME_FIELD else self._NAME_FIELD
            self._refresh_content()
            return

        if self.active_field == self._NAME_FIELD:
            if event.key == "backspace":
                self.name_value = self.name_value[:-1]
            elif event.is_printable and event.character:
                self.name_value += event.character
            else:
                return
            self.error = ""
            self._refresh_content()
            return

        if event.character and event.character.isdigit():
            self.toggle_difficulty(int(event.character))

    def toggle_difficulty(self, level: int) -> None:
        if not (MIN_LEVEL <= level <= MAX_LEVEL):
            return
        if level in self.selected_difficulties:
            self.selected_difficulties.remove(level)
        else:
            self.selected_difficulties.append(level)
        self.error = ""
        self._refresh_content()

    def _confirm(self) -> None:
        error = self.on_submit(self.name_value, list(self.selected_difficulties))
        if error:
            self.error = error
            self._refresh_content()
            return
        self.dismiss(True)

    def _refresh_content(self) -> None:
        body = self.query_one("#add-body", Static)
        error_widget = self.query_one("#add-error", Static)
        help_widget = self.query_one("#add-help", Static)

        content = Text(style="white")
        name_pointer = "➤ " if self.active_field == self._NAME_FIELD else "  "
        cursor = "|" if self.active_field == self._NAME_FIELD else ""
        content.append(f"{name_pointer}Name: {self.name_value}{cursor}\n\n")

        diff_pointer = "➤ " if self.active_field == self._DIFFICULTY_FIELD else "  "
        content.append(f"{diff_pointer}Difficulty categories (several allowed): ")
        for level in range(MIN_LEVEL, MAX_LEVEL + 1):
            if level in self.selected_difficulties:
                content.append(f"[{level}]", style=badge_style(level))
            else:
                content.append(f" {level} ", style="dim")
            content.append(" ")

        chosen = ", ".join(str(level) for level in sorted(self.selected_difficulties))
        content.append(f"\n  Selected: {chosen or 'nothing'}", style="italic")

        body.update(content)
        error_widget.update(self.error or "")
        if self.active_field == self._NAME_FIELD:
            help_widget.update("Type the name. Tab to categories, Enter add, Esc cancel")
        else:
            help_widget.update("1-5 toggle category. Tab to name, Enter add, Esc cancel")
