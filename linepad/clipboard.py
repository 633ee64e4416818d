"""A single-slot clipboard holding a bounded amount of text."""

CLIPBOARD_MAX = 1024


class Clipboard:
    """Holds the most recently copied text, at most ``CLIPBOARD_MAX - 1`` characters."""

    def __init__(self):
        self._text = ""

    def copy(self, text):
        """Replace the clipboard contents, truncating text that is too long."""
        self._text = text[: CLIPBOARD_MAX - 1]

    def paste(self):
        """Return the current clipboard contents."""
        return self._text

    def is_empty(self):
        """Return True when nothing (or only empty text) has been copied."""
        return not self._text

    def __repr__(self):
        return f"Clipboard({self._text!r})"