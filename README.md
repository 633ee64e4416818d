# linepad

linepad is a small interactive text editor that works one line at a time. It keeps
the text as a list of lines. It has a clipboard for copy, cut and paste, a cursor
for writing over text, and undo and redo with a limited history.

## Installing

```
pip install .
```

## Interactive use

Start the editor with:

```
linepad
```

It takes no options other than `--help`. A numbered command menu is shown before
every command. Type a number, then answer the prompts that follow:

| Command | Action |
|---|---|
| 1 | Append text to the last line (a first line is started if there is none) |
| 2 | Start a new empty line |
| 3 | Save the text to a file |
| 4 | Load text from a file, replacing the current text |
| 5 | Print the text |
| 6 | Insert text at a line and index |
| 7 | Search for text and list every match as line and index |
| 8 | Delete a number of characters from a line and index |
| 9 | Cut a range to the clipboard |
| 10 | Copy a range to the clipboard |
| 11 | Paste the clipboard at a line and index |
| 12 | Undo |
| 13 | Redo |
| 14 | Set the cursor |
| 15 | Write text over the line at the cursor |
| 16 | Show the cursor position |
| 0 | Exit |

Lines and indexes count from 0. An unknown number prints
"The command is not implemented". The loop ends on command 0, at the end of
input, or when a number was expected and none could be read. If a file cannot
be opened for saving or loading, a message saying so is printed and the text is
left as it was.

## Use as a library

```python
from linepad.editor import TextEditor

editor = TextEditor()
editor.append_text("hello world")
editor.insert_text(0, 5, ",")
editor.undo()
print(editor.render())  # "hello world\n"
```

`TextEditor` offers:

- `append_text`, `new_line`, `insert_text(line, index, text)` and
  `delete_range(line, index, count)` for editing;
- `search_text(query)`, which returns a list of `(line, index)` pairs for every
  occurrence, overlapping ones included (an empty query finds nothing);
- `copy`, `cut` and `paste`, using the editor's `clipboard`
  (a `linepad.clipboard.Clipboard`);
- `set_cursor(line, index)` and `insert_with_replacement(text)`, with the
  position readable from `cursor_line` and `cursor_index`;
- `undo` and `redo`, using the editor's `history`
  (a `linepad.history.History`);
- `save_to_file(filename)` and `load_from_file(filename)`, which raise
  `OSError` when the file cannot be opened;
- `render()`, which returns the text with every line ended by a newline, and
  `lines`, a copy of the current lines.

Calls that name a line that does not exist do nothing.

### Limits

- At most 1000 lines; longer files are cut short on loading.
- At most 1023 characters per line; longer lines read from a file are split
  into several lines, and edits that would go past the limit are cut off.
- The clipboard holds at most 1023 characters.
- The history keeps at most ten states to undo. Once it is full, further
  changes are not recorded until something has been undone.

### Driving the menu from code

`linepad.cli.run(editor, stdin, stdout)` runs the menu loop, reading commands
from any text stream and writing its output to another.
`linepad.cli.help_text()` returns the command menu as a string.

## What it does not do

linepad has no full-screen view and no key bindings: all editing goes through
the numbered menu, with positions typed in as numbers.

## Running the tests

```
pip install .[test]
pytest
```