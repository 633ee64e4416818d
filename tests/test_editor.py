import pytest

from linepad.editor import MAX_LINE_LENGTH, MAX_LINES, TextEditor


def make_editor(*lines):
    editor = TextEditor()
    for text in lines:
        editor.new_line()
        editor.insert_text(len(editor.lines) - 1, 0, text)
    return editor


def test_append_creates_first_line():
    editor = TextEditor()
    editor.append_text("hello")
    assert editor.lines == ["hello"]


def test_append_extends_last_line():
    editor = make_editor("first", "sec")
    editor.append_text("ond")
    assert editor.lines == ["first", "sec" + "ond"]


def test_new_line_adds_empty_line():
    editor = make_editor("a")
    editor.new_line()
    assert editor.lines == ["a", ""]


def test_new_line_respects_limit():
    editor = TextEditor()
    for _ in range(MAX_LINES + 3):
        editor.new_line()
    assert len(editor.lines) == MAX_LINES


def test_insert_text_in_middle():
    editor = make_editor("held")
    editor.insert_text(0, 2, "XY")
    assert editor.lines == ["heXYld"]


def test_insert_out_of_range_line_is_ignored():
    editor = make_editor("abc")
    editor.insert_text(5, 0, "zzz")
    editor.insert_text(-1, 0, "zzz")
    assert editor.lines == ["abc"]


def test_insert_index_past_end_appends():
    base = "abc"
    editor = make_editor(base)
    editor.insert_text(0, 50, "!")
    assert editor.lines == [base + "!"]


def test_delete_range():
    editor = make_editor("abcdef")
    editor.delete_range(0, 1, 2)
    assert editor.lines == ["adef"]


def test_delete_range_clamps_count():
    base = "abcdef"
    editor = make_editor(base)
    editor.delete_range(0, 3, 100)
    assert editor.lines == [base[:3]]


def test_delete_invalid_index_changes_nothing():
    editor = make_editor("abc")
    editor.delete_range(0, 3, 1)
    editor.delete_range(0, -1, 1)
    assert editor.lines == ["abc"]


def test_search_finds_overlapping_matches():
    editor = make_editor("aaa", "bab")
    assert editor.search_text("aa") == [(0, 0), (0, 1)]


def test_search_positions_hold_query():
    editor = make_editor("the cat sat", "cathedral", "none")
    query = "at"
    results = editor.search_text(query)
    assert len(results) == sum(line.count(query) for line in editor.lines)
    for line, index in results:
        assert editor.lines[line][index : index + len(query)] == query


def test_search_empty_query_finds_nothing():
    editor = make_editor("abc")
    assert editor.search_text("") == []


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "doc.txt"
    editor = make_editor("one", "", "three")
    editor.save_to_file(path)
    assert path.read_text(encoding="utf-8") == editor.render()
    other = make_editor("old")
    other.load_from_file(path)
    assert other.lines == editor.lines


def test_load_splits_long_lines(tmp_path):
    path = tmp_path / "long.txt"
    text = "q" * 1500
    path.write_text(text + "\n", encoding="utf-8")
    editor = TextEditor()
    editor.load_from_file(path)
    assert "".join(editor.lines) == text
    assert len(editor.lines) == 2
    assert all(len(line) <= MAX_LINE_LENGTH - 1 for line in editor.lines)


def test_load_missing_file_raises_and_keeps_text(tmp_path):
    editor = make_editor("keep")
    with pytest.raises(FileNotFoundError):
        editor.load_from_file(tmp_path / "missing.txt")
    assert editor.lines == ["keep"]


def test_copy_and_paste(tmp_path):
    editor = make_editor("hello world", "")
    editor.copy(0, 0, 5)
    assert editor.clipboard.paste() == "hello"
    editor.paste(1, 0)
    assert editor.lines[1] == editor.clipboard.paste()


def test_copy_invalid_line_leaves_clipboard():
    editor = make_editor("abc")
    editor.copy(3, 0, 2)
    assert editor.clipboard.is_empty()


def test_cut_removes_and_copies():
    base = "abcdef"
    editor = make_editor(base)
    editor.cut(0, 2, 3)
    assert editor.clipboard.paste() == base[2:5]
    assert editor.lines == [base[:2] + base[5:]]


def test_set_cursor_ignores_invalid_values():
    editor = make_editor("a", "b")
    editor.set_cursor(1, 4)
    assert (editor.cursor_line, editor.cursor_index) == (1, 4)
    editor.set_cursor(7, MAX_LINE_LENGTH)
    assert (editor.cursor_line, editor.cursor_index) == (1, 4)


def test_insert_with_replacement_overwrites():
    base = "abcdef"
    editor = make_editor(base)
    editor.set_cursor(0, 2)
    editor.insert_with_replacement("XY")
    result = editor.lines[0]
    assert len(result) == len(base)
    assert result[:2] == base[:2]
    assert result[2:4] == "XY"
    assert result[4:] == base[4:]


def test_insert_with_replacement_extends_line():
    base = "abcdef"
    editor = make_editor(base)
    editor.set_cursor(0, 4)
    editor.insert_with_replacement("XYZ")
    assert editor.lines == [base[:4] + "XYZ"]


def test_insert_with_replacement_beyond_end_changes_nothing():
    editor = make_editor("ab")
    editor.set_cursor(0, 10)
    editor.insert_with_replacement("xy")
    assert editor.lines == ["ab"]


def test_insert_with_replacement_without_lines_does_nothing():
    editor = TextEditor()
    editor.insert_with_replacement("xy")
    assert editor.lines == []


def test_undo_and_redo():
    editor = TextEditor()
    editor.append_text("one")
    editor.append_text("two")
    after = editor.lines
    editor.undo()
    assert editor.lines == ["one"]
    editor.redo()
    assert editor.lines == after


def test_undo_without_history_does_nothing():
    editor = TextEditor()
    editor.new_line()
    editor.undo()
    editor.redo()
    assert editor.lines == [""]


def test_render_terminates_every_line():
    editor = make_editor("x", "y")
    rendered = editor.render()
    assert rendered.splitlines() == editor.lines
    assert rendered.endswith("\n")


def test_lines_is_a_copy():
    editor = make_editor("a")
    editor.lines.append("b")
    assert editor.lines == ["a"]