"""Interactive menu-driven front end for the editor."""

import argparse
import string
import sys

from .editor import TextEditor

_MENU = (
    "\nCommands:\n"
    "1 - Append text\n2 - New line\n3 - Save\n4 - Load\n5 - Print\n"
    "6 - Insert\n7 - Search\n8 - Delete\n"
    "9 - Cut\n10 - Copy\n11 - Paste\n12 - Undo\n13 - Redo\n14 - Set cursor\n"
    "15 - Insert with replacement\n16 - Check cursor\n0 - Exit\n"
)


class _InputEnded(Exception):
    """Raised when input runs out or cannot be read as expected."""


class _Reader:
    """Reads integers and whole lines from a character stream."""

    def __init__(self, stream):
        self._stream = stream
        self._pending = ""

    def _next_char(self):
        if self._pending:
            ch, self._pending = self._pending, ""
            return ch
        return self._stream.read(1)

    def integer(self):
        ch = self._next_char()
        while ch and ch.isspace():
            ch = self._next_char()
        token = ""
        if ch and ch in "+-":
            token, ch = ch, self._next_char()
        while ch and ch in string.digits:
            token += ch
            ch = self._next_char()
        if ch:
            self._pending = ch
        if not token.lstrip("+-"):
            raise _InputEnded
        return int(token)

    def integers(self, count):
        return [self.integer() for _ in range(count)]

    def skip_char(self):
        self._next_char()

    def line(self):
        ch = self._next_char()
        if not ch:
            raise _InputEnded
        chars = []
        while ch and ch != "\n":
            chars.append(ch)
            ch = self._next_char()
        return "".join(chars)


def help_text():
    """Return the command menu."""
    return _MENU


def _prompt(out, text):
    out.write(text)
    out.flush()


def _append(editor, reader, out):
    _prompt(out, "Enter text to append: ")
    editor.append_text(reader.line())


def _new_line(editor, reader, out):
    editor.new_line()
    out.write("New line is started\n")


def _save(editor, reader, out):
    _prompt(out, "Enter the file name for saving: ")
    name = reader.line()
    try:
        editor.save_to_file(name)
    except OSError as exc:
        out.write(f"Could not save the text: {exc}\n")
    else:
        out.write("Text has been saved successfully\n")


def _load(editor, reader, out):
    _prompt(out, "Enter the file name for loading: ")
    name = reader.line()
    try:
        editor.load_from_file(name)
    except OSError as exc:
        out.write(f"Could not load the text: {exc}\n")
    else:
        out.write("Text has been loaded successfully\n")


def _print(editor, reader, out):
    out.write(editor.render())


def _insert(editor, reader, out):
    _prompt(out, "Choose line and index: ")
    line, index = reader.integers(2)
    reader.skip_char()
    _prompt(out, "Enter text to insert: ")
    editor.insert_text(line, index, reader.line())


def _search(editor, reader, out):
    _prompt(out, "Enter text to search: ")
    for line, index in editor.search_text(reader.line()):
        out.write(f"Found at line {line}, index {index}\n")


def _delete(editor, reader, out):
    _prompt(out, "Enter line, index, and count to delete: ")
    line, index, count = reader.integers(3)
    reader.skip_char()
    editor.delete_range(line, index, count)


def _cut(editor, reader, out):
    _prompt(out, "Enter line, index, and count to cut: ")
    line, index, count = reader.integers(3)
    reader.skip_char()
    editor.cut(line, index, count)
    out.write("Cut completed.\n")


def _copy(editor, reader, out):
    _prompt(out, "Enter line and index to copy: ")
    line, index = reader.integers(2)
    reader.skip_char()
    _prompt(out, "Enter number of characters to copy: ")
    count = reader.integer()
    reader.skip_char()
    editor.copy(line, index, count)
    out.write("Copied successfully.\n")


def _paste(editor, reader, out):
    _prompt(out, "Enter line and index to paste: ")
    line, index = reader.integers(2)
    reader.skip_char()
    editor.paste(line, index)
    out.write("Pasted successfully.\n")


def _undo(editor, reader, out):
    editor.undo()
    out.write("Undo completed.\n")


def _redo(editor, reader, out):
    editor.redo()
    out.write("Redo completed.\n")


def _set_cursor(editor, reader, out):
    _prompt(out, "Enter line and index to set cursor: ")
    line, index = reader.integers(2)
    reader.skip_char()
    editor.set_cursor(line, index)
    out.write("Cursor set successfully.\n")


def _replace(editor, reader, out):
    _prompt(out, "Enter text to insert with replacement: ")
    editor.insert_with_replacement(reader.line())
    out.write("Inserted with replacement.\n")


def _check_cursor(editor, reader, out):
    out.write(
        f"Cursor is at line {editor.cursor_line}, index {editor.cursor_index}\n"
    )


_COMMANDS = {
    1: _append,
    2: _new_line,
    3: _save,
    4: _load,
    5: _print,
    6: _insert,
    7: _search,
    8: _delete,
    9: _cut,
    10: _copy,
    11: _paste,
    12: _undo,
    13: _redo,
    14: _set_cursor,
    15: _replace,
    16: _check_cursor,
}


def run(editor, stdin, stdout):
    """Run the command loop until command 0 or the end of input."""
    reader = _Reader(stdin)
    try:
        while True:
            stdout.write(help_text())
            _prompt(stdout, "> Choose the command: ")
            command = reader.integer()
            reader.skip_char()
            if command == 0:
                return
            handler = _COMMANDS.get(command)
            if handler is None:
                stdout.write("The command is not implemented\n")
            else:
                handler(editor, reader, stdout)
    except _InputEnded:
        return


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="linepad", description="Interactive line-based text editor."
    )
    parser.parse_args(argv)
    run(TextEditor(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())