"""Instruction panel: one modal form per interaction mode.

Each form owns only the buffers its mode needs and implements the same four
calls: ``draw_ops``, ``draw_hints``, ``receive_input``, and
``validate_and_build``. The panel picks forms from a closed mode table.
"""

from __future__ import annotations

from pathlib import Path

from ..dispatcher import Mode
from ..errors import ValidationError
from ..input import is_text_key
from ..manifest import ItemConfig, TabConfig
from ..ops import NO_OP, AppendGame, AppendTab, ConfigOp, RemoveGame, RemoveTab
from ..render import Frame, Rect, UITheme

HINT_ROWS = 2


def _edit(buffer: str, key: str) -> str:
    """Apply one edit key: backspace pops, printable text appends."""
    if key == "BACKSPACE":
        return buffer[:-1]
    if is_text_key(key):
        return buffer + key
    return buffer


def _parse_index(text: str, what: str) -> int:
    text = text.strip()
    if not text:
        raise ValidationError(f"{what} index is an empty value")
    try:
        value = int(text)
    except ValueError:
        raise ValidationError(f"{what} index is not a valid number: {text!r}") from None
    if value < 0:
        raise ValidationError(f"{what} index must not be negative: {value}")
    return value


def _draw_keys(frame: Frame, area: Rect, theme: UITheme, rows: tuple[tuple[str, str], ...]) -> None:
    for row, (key, text) in enumerate(rows):
        col = frame.put_in(area, row, f"[{key}] ", theme.key)
        frame.put_in(area, row, text, "", indent=col)


def _draw_field(frame: Frame, area: Rect, row: int, theme: UITheme, label: str, value: str, focused: bool) -> None:
    col = frame.put_in(area, row, "› " if focused else "  ", theme.input_focus)
    col += frame.put_in(area, row, f"{label}: ", theme.input_focus if focused else theme.dim, indent=col)
    col += frame.put_in(area, row, value, theme.input_text, indent=col)
    if focused:
        frame.put_in(area, row, " ", theme.reverse, indent=col)


class CommonForm:
    """Key help for browsing; ``hint`` carries the last error or status."""

    mode = Mode.COMMON

    def __init__(self, hint: str = "") -> None:
        self.hint = hint

    def draw_ops(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        _draw_keys(
            frame,
            area,
            theme,
            (
                ("Ctrl + n", "Append a new game."),
                ("Ctrl + d", "Remove a game."),
                ("Ctrl + t", "Append a new tab."),
                ("Ctrl + r", "Remove a tab."),
            ),
        )

    def draw_hints(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        if self.hint:
            frame.put_in(area, 0, self.hint, theme.hint)
        else:
            frame.put_in(area, 0, "Use arrow keys to select a game, Enter to launch it.", theme.dim)
        frame.put_in(area, 1, "Press ESC to quit the program.", theme.dim)

    def receive_input(self, key: str) -> None:
        pass

    def validate_and_build(self, tab_index: int | None) -> ConfigOp:
        return NO_OP


class NewGameForm:
    """Two-field form; Up/Down toggles focus between name and path."""

    mode = Mode.APPENDING_GAME

    def __init__(self) -> None:
        self.focus = "name"
        self.input_name = ""
        self.input_path = ""

    def switch_focus(self) -> None:
        self.focus = "path" if self.focus == "name" else "name"

    def draw_ops(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, "New game", theme.title)
        _draw_field(frame, area, 1, theme, "Name", self.input_name, self.focus == "name")
        _draw_field(frame, area, 2, theme, "Path", self.input_path, self.focus == "path")

    def draw_hints(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, "Press Enter to confirm, Up/Down to switch field.", theme.dim)
        frame.put_in(area, 1, "Press ESC to cancel.", theme.dim)

    def receive_input(self, key: str) -> None:
        if self.focus == "name":
            self.input_name = _edit(self.input_name, key)
        else:
            self.input_path = _edit(self.input_path, key)

    def validate_and_build(self, tab_index: int | None) -> ConfigOp:
        if tab_index is None:
            raise ValidationError("There is no tab to add the game to")
        name = self.input_name.strip()
        if not name:
            raise ValidationError("Name is an empty value")
        raw_path = self.input_path.strip()
        if not raw_path:
            raise ValidationError("Path is an empty value")
        path = Path(raw_path).expanduser()
        if not path.is_file():
            raise ValidationError("Path is not a valid value")
        return AppendGame(tab_index=tab_index, config=ItemConfig(name=name, path=str(path)))


class NewTabForm:
    mode = Mode.APPENDING_TAB

    def __init__(self) -> None:
        self.input_name = ""

    def draw_ops(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, "New tab", theme.title)
        _draw_field(frame, area, 1, theme, "Name", self.input_name, True)

    def draw_hints(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, "Press Enter to confirm.", theme.dim)
        frame.put_in(area, 1, "Press ESC to cancel.", theme.dim)

    def receive_input(self, key: str) -> None:
        self.input_name = _edit(self.input_name, key)

    def validate_and_build(self, tab_index: int | None) -> ConfigOp:
        name = self.input_name.strip()
        if not name:
            raise ValidationError("Tab name is an empty value")
        return AppendTab(config=TabConfig(name=name))


class RemoveGameForm:
    """Index of the game to drop from the current tab (as listed)."""

    mode = Mode.REMOVING_GAME

    def __init__(self) -> None:
        self.input_index = ""

    def draw_ops(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, "Remove a game from the current tab", theme.title)
        _draw_field(frame, area, 1, theme, "Game index", self.input_index, True)

    def draw_hints(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, "Type the number shown next to the game, Enter to remove.", theme.dim)
        frame.put_in(area, 1, "Press ESC to cancel.", theme.dim)

    def receive_input(self, key: str) -> None:
        self.input_index = _edit(self.input_index, key)

    def validate_and_build(self, tab_index: int | None) -> ConfigOp:
        if tab_index is None:
            raise ValidationError("There is no tab to remove a game from")
        # Range is checked when the op is applied.
        return RemoveGame(tab_index=tab_index, item_index=_parse_index(self.input_index, "Game"))


class RemoveTabForm:
    mode = Mode.REMOVING_TAB

    def __init__(self) -> None:
        self.input_index = ""

    def draw_ops(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, "Remove a tab", theme.title)
        _draw_field(frame, area, 1, theme, "Tab index", self.input_index, True)

    def draw_hints(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, "Type the number shown in the tab bar, Enter to remove.", theme.dim)
        frame.put_in(area, 1, "Press ESC to cancel.", theme.dim)

    def receive_input(self, key: str) -> None:
        self.input_index = _edit(self.input_index, key)

    def validate_and_build(self, tab_index: int | None) -> ConfigOp:
        return RemoveTab(tab_index=_parse_index(self.input_index, "Tab"))


class RunningForm:
    """Shown while a launched program holds the terminal."""

    mode = Mode.RUNNING

    def __init__(self, program_name: str = "") -> None:
        self.program_name = program_name

    def draw_ops(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, f"Running {self.program_name}...", theme.title)

    def draw_hints(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.put_in(area, 0, "Waiting for the program to exit.", theme.dim)

    def receive_input(self, key: str) -> None:
        pass

    def validate_and_build(self, tab_index: int | None) -> ConfigOp:
        return NO_OP


InstructionForm = CommonForm | NewGameForm | NewTabForm | RemoveGameForm | RemoveTabForm | RunningForm

FORM_FOR_MODE: dict[Mode, type[InstructionForm]] = {
    Mode.COMMON: CommonForm,
    Mode.APPENDING_GAME: NewGameForm,
    Mode.APPENDING_TAB: NewTabForm,
    Mode.REMOVING_GAME: RemoveGameForm,
    Mode.REMOVING_TAB: RemoveTabForm,
    Mode.RUNNING: RunningForm,
}


class InstructionPanel:
    """Owns the active form; confirming or cancelling always returns to Common."""

    def __init__(self) -> None:
        self.form: InstructionForm = CommonForm()

    @property
    def mode(self) -> Mode:
        return self.form.mode

    def switch_mode(self, mode: Mode, program_name: str | None = None) -> None:
        if mode is Mode.RUNNING:
            self.form = RunningForm(program_name or "")
        else:
            self.form = FORM_FOR_MODE[mode]()

    def input_word(self, key: str) -> None:
        self.form.receive_input(key)

    def switch_input_focus(self) -> None:
        if isinstance(self.form, NewGameForm):
            self.form.switch_focus()

    def cancel_op(self) -> None:
        self.form = CommonForm()

    def confirm_op(self, tab_index: int | None) -> ConfigOp:
        """Consume the active form and build its op.

        Raises ``ValidationError``; the panel is back in Common either way.
        """
        form = self.form
        self.form = CommonForm()
        return form.validate_and_build(tab_index)

    def set_hint(self, text: str) -> None:
        if isinstance(self.form, CommonForm):
            self.form.hint = text

    @property
    def hint(self) -> str:
        return self.form.hint if isinstance(self.form, CommonForm) else ""

    def draw(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.box(area, "Instruction", theme.border, theme.title)
        ops_area, hints_area = area.inner().split_rows([None, HINT_ROWS])
        self.form.draw_ops(frame, ops_area, theme)
        self.form.draw_hints(frame, hints_area, theme)
