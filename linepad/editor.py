"""A line-oriented text buffer with clipboard, cursor and undo/redo."""

from itertools import islice

from .clipboard import Clipboard
from .history import History

MAX_LINES = 1000
MAX_LINE_LENGTH = 1024


def _fit(text):
    """Trim a line to the longest length a line may hold."""
    return text[: MAX_LINE_LENGTH - 1]


def _read_lines(handle):
    """Yield lines the way a fixed-size line reader sees them.

    Lines longer than ``MAX_LINE_LENGTH - 1`` characters are split into
    several lines; the trailing newline is removed.
    """
    width = MAX_LINE_LENGTH - 1
    for raw in handle:
        for start in range(0, len(raw), width):
            yield raw[start : start + width].split("\n", 1)[0]


class TextEditor:
    """An editable list of lines."""

    def __init__(self):
        self._lines: list[str] = []
        self._cursor_line = 0
        self._cursor_index = 0
        self.clipboard = Clipboard()
        self.history = History()

    @property
    def lines(self):
        """A copy of the current lines."""
        return list(self._lines)

    @property
    def cursor_line(self):
        return self._cursor_line

    @property
    def cursor_index(self):
        return self._cursor_index

    def _has_line(self, line):
        return 0 <= line < len(self._lines)

    def render(self):
        """Return the text with every line terminated by a newline."""
        return "".join(f"{line}\n" for line in self._lines)

    def append_text(self, text):
        """Append text to the last line, starting a line if there is none."""
        if not self._lines:
            self.new_line()
        self.history.save(self._lines)
        self._lines[-1] = _fit(self._lines[-1] + text)

    def new_line(self):
        """Start a new empty line unless the line limit is reached."""
        if len(self._lines) >= MAX_LINES:
            return
        self._lines.append("")

    def insert_text(self, line, index, text):
        """Insert text into ``line`` at ``index``."""
        if not self._has_line(line):
            return
        self.history.save(self._lines)
        old = self._lines[line]
        index = min(max(index, 0), len(old))
        self._lines[line] = _fit(old[:index] + text + old[index:])

    def delete_range(self, line, index, count):
        """Delete up to ``count`` characters from ``line`` starting at ``index``."""
        if not self._has_line(line):
            return
        self.history.save(self._lines)
        text = self._lines[line]
        if not 0 <= index < len(text) or count <= 0:
            return
        self._lines[line] = text[:index] + text[index + count :]

    def search_text(self, query):
        """Return ``(line, index)`` for every occurrence of query, overlaps included."""
        if not query:
            return []
        found = []
        for number, text in enumerate(self._lines):
            start = text.find(query)
            while start != -1:
                found.append((number, start))
                start = text.find(query, start + 1)
        return found

    def save_to_file(self, filename):
        """Write all lines to ``filename``; raises OSError if it cannot be opened."""
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(self.render())

    def load_from_file(self, filename):
        """Replace the text with the contents of ``filename``.

        Raises OSError if the file cannot be opened; the text is then unchanged.
        """
        with open(filename, encoding="utf-8") as handle:
            self._lines = list(islice(_read_lines(handle), MAX_LINES))

    def copy(self, line, index, count):
        """Copy up to ``count`` characters of ``line`` from ``index`` to the clipboard."""
        if not self._has_line(line):
            return
        if index < 0 or count < 0:
            return
        self.clipboard.copy(self._lines[line][index : index + count])

    def cut(self, line, index, count):
        """Copy a range to the clipboard and delete it."""
        self.copy(line, index, count)
        self.delete_range(line, index, count)

    def paste(self, line, index):
        """Insert the clipboard contents into ``line`` at ``index``."""
        self.insert_text(line, index, self.clipboard.paste())

    def set_cursor(self, line, index):
        """Move the cursor; each coordinate is changed only if it is valid."""
        if self._has_line(line):
            self._cursor_line = line
        if 0 <= index < MAX_LINE_LENGTH:
            self._cursor_index = index

    def insert_with_replacement(self, text):
        """Overwrite characters at the cursor with text, extending the line if needed."""
        line = self._cursor_line
        if not self._has_line(line):
            return
        self.history.save(self._lines)
        index = self._cursor_index
        if index + len(text) >= MAX_LINE_LENGTH:
            return
        original = self._lines[line]
        if index > len(original):
            return
        self._lines[line] = original[:index] + text + original[index + len(text) :]

    def undo(self):
        """Restore the previous state, if any."""
        state = self.history.undo(self._lines)
        if state is not None:
            self._lines = state

    def redo(self):
        """Restore the state most recently undone, if any."""
        state = self.history.redo(self._lines)
        if state is not None:
            self._lines = state