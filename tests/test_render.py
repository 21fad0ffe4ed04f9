"""Unit tests for frame rendering."""
import io
from dataclasses import replace

from hypothesis import given, settings
from hypothesis import strategies as st
from rich.console import Console

from termchat.console import FrameRenderer, MessageStore, Role
from termchat.console.config import HELP_TEXT
from termchat.console.render import wrap_cells


def _drawn_cursor(frame) -> tuple[int, int] | None:
    """Screen position of the reverse-video cell in the drawn frame."""
    console = Console(width=frame.width, file=io.StringIO(), legacy_windows=False)
    x = y = 0
    for segment in console.render(frame):
        if segment.style is not None and segment.style.reverse:
            return (x, y)
        if "\n" in segment.text:
            y += segment.text.count("\n")
            x = 0
        else:
            x += segment.cell_length
    return None


def _store(*turns: tuple[Role, str]) -> MessageStore:
    store = MessageStore()
    for role, text in turns:
        store.append(role, text)
    return store


class TestWrapCells:
    """Tests for cell-width wrapping."""

    def test_short_text_is_one_row(self):
        assert wrap_cells("hello", 10) == ["hello"]

    def test_empty_text_is_one_empty_row(self):
        assert wrap_cells("", 10) == [""]

    def test_long_text_wraps(self):
        assert wrap_cells("abcdefgh", 3) == ["abc", "def", "gh"]

    def test_newlines_start_rows(self):
        assert wrap_cells("ab\ncd", 10) == ["ab", "cd"]

    def test_wide_characters_count_double(self):
        """Test that CJK characters take two cells each."""
        assert wrap_cells("你好世界", 4) == ["你好", "世界"]

    def test_zero_width_still_progresses(self):
        assert wrap_cells("ab", 0) == ["a", "b"]


class TestLayout:
    """Tests for region sizes and placement."""

    def test_regions_fill_the_screen(self):
        """Test history + input + help take exactly the terminal height."""
        frame = FrameRenderer().render(MessageStore(), "", (40, 12))
        lines = frame.export_text().splitlines()

        assert frame.history_height == 8
        assert len(lines) == 12

    def test_titles_and_help(self):
        """Test the bordered titles and the help legend."""
        frame = FrameRenderer().render(MessageStore(), "", (60, 10))
        lines = frame.export_text().splitlines()

        assert "History" in lines[0]
        assert "Input" in lines[6]
        assert lines[-1].rstrip() == HELP_TEXT

    def test_messages_render_with_prefixes(self):
        """Test that each message becomes 'Prefix: text' in order."""
        store = _store((Role.USER, "ping"), (Role.ASSISTANT, "pong"))
        text = FrameRenderer().render(store, "", (40, 10)).export_text()

        assert text.index("You: ping") < text.index("Bot: pong")

    def test_input_buffer_is_shown(self):
        frame = FrameRenderer().render(MessageStore(), "draft", (40, 10))
        lines = frame.export_text().splitlines()

        assert frame.input_row == "draft"
        assert "draft" in lines[7]

    def test_status_appears_in_input_border(self):
        frame = FrameRenderer().render(MessageStore(), "", (60, 10), status="waiting for reply...")
        lines = frame.export_text().splitlines()

        assert "waiting for reply..." in lines[8]

    def test_tiny_terminal_keeps_minimum_history(self):
        """Test that a terminal shorter than the fixed regions still renders."""
        frame = FrameRenderer().render(_store((Role.USER, "x")), "", (20, 3))

        assert frame.history_height == 2
        assert frame.history_rows == ()


class TestHistoryOverflow:
    """Tests for history taller than its region."""

    def test_latest_messages_stay_visible(self):
        """Test that the oldest rows are dropped first."""
        store = _store(*[(Role.USER, f"message {i}") for i in range(30)])
        frame = FrameRenderer().render(store, "", (40, 10))
        rows = [row.text for row in frame.history_rows]

        assert len(rows) == 4  # 10 - 3 input - 1 help - 2 borders
        assert rows[-1] == "You: message 29"
        assert "You: message 0" not in rows

    def test_long_message_wraps_and_keeps_its_tail(self):
        store = _store((Role.ASSISTANT, "x" * 100))
        frame = FrameRenderer().render(store, "", (22, 8))
        rows = frame.history_rows

        assert all(len(row.text) <= 20 for row in rows)
        assert rows[-1].text.endswith("x")
        assert not rows[0].head  # The prefix row scrolled away

    def test_multiline_reply_keeps_line_breaks(self):
        store = _store((Role.ASSISTANT, "one\ntwo"))
        frame = FrameRenderer().render(store, "", (40, 10))

        assert [row.text for row in frame.history_rows] == ["Bot: one", "two"]

    def test_control_characters_are_removed(self):
        store = _store((Role.ASSISTANT, "a\rb\tc"))
        frame = FrameRenderer().render(store, "", (40, 10))

        assert frame.history_rows[0].text == "Bot: ab   c"


class TestCursor:
    """Tests for cursor placement in the input region."""

    def test_cursor_after_empty_buffer(self):
        frame = FrameRenderer().render(MessageStore(), "", (80, 24))

        assert frame.cursor == (1, 21)

    def test_cursor_follows_last_character(self):
        frame = FrameRenderer().render(MessageStore(), "hello", (80, 24))

        assert frame.cursor == (6, 21)

    def test_cursor_counts_wide_characters(self):
        frame = FrameRenderer().render(MessageStore(), "你好", (80, 24))

        assert frame.cursor == (5, 21)

    def test_long_buffer_wraps_to_visible_row(self):
        """Test that the row holding the cursor is the one displayed."""
        frame = FrameRenderer().render(MessageStore(), "abcdefghij" * 2 + "xyz", (12, 10))

        assert frame.input_row == "xyz"
        assert frame.cursor == (4, 7)

    def test_full_row_moves_cursor_to_fresh_row(self):
        frame = FrameRenderer().render(MessageStore(), "abcdefghij", (12, 10))

        assert frame.input_row == ""
        assert frame.cursor == (1, 7)

    def test_cursor_cell_is_drawn_at_cursor(self):
        frame = FrameRenderer().render(MessageStore(), "hello", (80, 24))

        assert _drawn_cursor(frame) == (6, 21)
        assert _drawn_cursor(replace(frame, cursor=(10, 21))) == (10, 21)


class TestIdempotence:
    """Tests that rendering is a pure function of its inputs."""

    def test_same_inputs_same_frame(self):
        store = _store((Role.USER, "a"), (Role.ASSISTANT, "b"))
        renderer = FrameRenderer()

        first = renderer.render(store, "typing", (50, 15))
        second = renderer.render(store, "typing", (50, 15))

        assert first == second
        assert first.export_text() == second.export_text()

    @settings(max_examples=50, deadline=None)
    @given(
        st.lists(st.tuples(st.sampled_from(list(Role)), st.text(max_size=60)), max_size=8),
        st.text(alphabet=st.characters(blacklist_categories=("Cc", "Cs")), max_size=80),
        st.integers(min_value=10, max_value=100),
        st.integers(min_value=5, max_value=40),
    )
    def test_rendering_twice_is_identical(self, turns, buffer, width, height):
        """Property test: two renders of the same state produce the same frame."""
        store = _store(*turns)
        renderer = FrameRenderer()

        first = renderer.render(store, buffer, (width, height))
        second = renderer.render(store, buffer, (width, height))

        assert first == second
        assert first.export_text() == second.export_text()
        assert first.cursor[0] < width
