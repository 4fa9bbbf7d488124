"""
Tests for edit plan values and their application.
"""

import pytest

from ts_autoimport.core.edits import (
  InsertEdit,
  NoOpEdit,
  Position,
  ReplaceEdit,
  TextRange,
  apply_edit,
  offset_at,
)


@pytest.mark.parametrize(
  "text, position, expected",
  [
    ("abc\ndef", Position(0, 0), 0),
    ("abc\ndef", Position(1, 0), 4),
    ("abc\r\ndef", Position(1, 1), 6),
    ("abc\rdef", Position(1, 0), 4),
    ("abc\ndef", Position(0, 99), 3),
    ("abc\ndef", Position(5, 0), 7),
    ("", Position(1, 0), 0),
  ],
)
def test_offset_at(text, position, expected):
  assert offset_at(text, position) == expected


def test_insert_at_second_line():
  edit = InsertEdit(Position(1, 0), "X\r\n")
  assert apply_edit("a\nb\n", edit) == "a\nX\r\nb\n"


def test_insert_past_end_appends():
  assert apply_edit("a", InsertEdit(Position(1, 0), "X")) == "aX"


def test_replace_whole_document():
  text = "line1\nline2\n"
  edit = ReplaceEdit(TextRange(Position(0, 0), Position(3, 0)), "new")
  assert apply_edit(text, edit) == "new"


def test_replace_partial_range():
  edit = ReplaceEdit(TextRange(Position(0, 1), Position(1, 1)), "-")
  assert apply_edit("abc\ndef", edit) == "a-ef"


def test_noop_returns_text():
  assert apply_edit("unchanged", NoOpEdit()) == "unchanged"


def test_unknown_edit_rejected():
  with pytest.raises(TypeError):
    apply_edit("text", "not an edit")


def test_to_dict_shapes():
  assert NoOpEdit().to_dict() == {"kind": "noop"}
  assert InsertEdit(Position(1, 0), "x").to_dict() == {
    "kind": "insert",
    "position": {"line": 1, "character": 0},
    "text": "x",
  }
  replace = ReplaceEdit(TextRange(Position(0, 0), Position(2, 0)), "y").to_dict()
  assert replace["kind"] == "replace"
  assert replace["range"]["end"] == {"line": 2, "character": 0}
