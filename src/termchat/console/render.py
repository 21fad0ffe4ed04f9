"""Frame rendering.

Hides layout decisions: how the screen is split into history, input and
help regions, how text wraps, and where the cursor goes. Rendering is a
pure function of (store, buffer, size, status); nothing here touches the
terminal.
"""

import io
from collections.abc import Iterable
from dataclasses import dataclass

from rich import box
from rich.cells import cell_len, get_character_cell_size
from rich.console import Console, ConsoleOptions, Group, RenderResult
from rich.control import strip_control_codes
from rich.panel import Panel
from rich.text import Text

from .config import (
    HELP_REGION_HEIGHT,
    HELP_TEXT,
    HISTORY_TITLE,
    INPUT_REGION_HEIGHT,
    INPUT_TITLE,
    MIN_HISTORY_HEIGHT,
)
from .models import Message, Role

BORDER = 1  # Cells taken by a panel edge

ROLE_STYLES = {
    Role.USER: "bold cyan",
    Role.ASSISTANT: "bold magenta",
}


def wrap_cells(text: str, width: int) -> list[str]:
    """Hard-wrap text to rows of at most ``width`` terminal cells.

    Explicit newlines always start a new row. Always returns at least one row.
    """
    width = max(width, 1)
    rows: list[str] = []
    for line in text.split("\n"):
        row: list[str] = []
        row_width = 0
        for char in line:
            size = get_character_cell_size(char)
            if row and row_width + size > width:
                rows.append("".join(row))
                row, row_width = [], 0
            row.append(char)
            row_width += size
        rows.append("".join(row))
    return rows


def _clean(text: str) -> str:
    return strip_control_codes(text.expandtabs(4))


@dataclass(frozen=True)
class HistoryRow:
    """One visual row of the history region."""

    text: str
    role: Role
    head: bool  # First row of its message (carries the prefix)


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw one screen."""

    width: int
    height: int
    history_height: int
    history_rows: tuple[HistoryRow, ...]
    input_row: str
    cursor: tuple[int, int]
    status: str | None = None
    help_text: str = HELP_TEXT

    def _history_text(self) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        for index, row in enumerate(self.history_rows):
            if index:
                text.append("\n")
            prefix = f"{row.role.prefix}:"
            if row.head and row.text.startswith(prefix):
                text.append(prefix, style=ROLE_STYLES[row.role])
                text.append(row.text[len(prefix):])
            else:
                text.append(row.text)
        return text

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        history = Panel(
            self._history_text(),
            title=HISTORY_TITLE,
            title_align="left",
            box=box.SQUARE,
            height=self.history_height,
            width=self.width,
            padding=0,
        )
        input_text = Text(self.input_row, no_wrap=True, overflow="crop")
        gap = self.cursor[0] - BORDER - cell_len(self.input_row)
        if gap > 0:
            input_text.append(" " * gap)
        input_text.append(" ", style="reverse")  # Cursor cell at self.cursor
        input_panel = Panel(
            input_text,
            title=INPUT_TITLE,
            title_align="left",
            subtitle=self.status,
            subtitle_align="right",
            box=box.SQUARE,
            height=INPUT_REGION_HEIGHT,
            width=self.width,
            padding=0,
        )
        help_line = Text(self.help_text, style="dim", no_wrap=True, overflow="ellipsis")
        yield Group(history, input_panel, help_line)

    def export_text(self) -> str:
        """Render the frame to plain text, one line per terminal row."""
        console = Console(
            width=self.width,
            height=self.height,
            file=io.StringIO(),
            record=True,
            color_system=None,
            legacy_windows=False,
        )
        console.print(self)
        return console.export_text()


class FrameRenderer:
    """Builds Frames from session state.

    Example:
        frame = FrameRenderer().render(store, "hello", (80, 24))
        frame.cursor  # (6, 21)
    """

    def render(
        self,
        messages: Iterable[Message],
        input_buffer: str,
        size: tuple[int, int],
        status: str | None = None,
    ) -> Frame:
        width, height = size
        inner_width = max(width - 2 * BORDER, 1)
        history_height = max(
            height - INPUT_REGION_HEIGHT - HELP_REGION_HEIGHT, MIN_HISTORY_HEIGHT
        )

        input_row = self._input_row(input_buffer, inner_width)
        cursor = (BORDER + cell_len(input_row), history_height + BORDER)

        return Frame(
            width=width,
            height=height,
            history_height=history_height,
            history_rows=self._history_rows(
                messages, inner_width, history_height - 2 * BORDER
            ),
            input_row=input_row,
            cursor=cursor,
            status=status,
        )

    def _history_rows(
        self, messages: Iterable[Message], width: int, rows: int
    ) -> tuple[HistoryRow, ...]:
        if rows <= 0:
            return ()
        lines: list[HistoryRow] = []
        for message in messages:
            wrapped = wrap_cells(_clean(message.display()), width)
            lines.extend(
                HistoryRow(text=row, role=message.role, head=index == 0)
                for index, row in enumerate(wrapped)
            )
        # Oldest rows go first so the latest turn stays on screen
        return tuple(lines[-rows:])

    def _input_row(self, input_buffer: str, width: int) -> str:
        rows = wrap_cells(_clean(input_buffer), width)
        # A full last row pushes the cursor onto a fresh row
        if cell_len(rows[-1]) >= width:
            rows.append("")
        return rows[-1]
