"""
Tests for the document snapshot.
"""

import pytest

from ts_autoimport.core.document import DocumentText, count_lines


@pytest.mark.parametrize(
  "text, lines",
  [
    ("", 1),
    ("a", 1),
    ("a\n", 2),
    ("a\r\nb", 2),
    ("a\rb\nc", 3),
  ],
)
def test_count_lines(text, lines):
  assert count_lines(text) == lines


def test_line_count_derived():
  assert DocumentText(text="a\nb", file_name="/x.ts").line_count == 2


def test_line_count_explicit():
  assert DocumentText(text="a", file_name="/x.ts", line_count=10).line_count == 10


def test_from_path_preserves_crlf(tmp_path):
  target = tmp_path / "main.ts"
  target.write_bytes(b"const a = 1;\r\nconst b = 2;\r\n")

  doc = DocumentText.from_path(target)

  assert doc.text == "const a = 1;\r\nconst b = 2;\r\n"
  assert doc.file_name == str(target.resolve())
  assert doc.line_count == 3


def test_document_is_immutable():
  doc = DocumentText(text="a", file_name="/x.ts")
  with pytest.raises(AttributeError):
    doc.text = "b"


def test_negative_line_count_derived():
  assert DocumentText(text="a\rb\rc", file_name="/x.ts", line_count=-1).line_count == 3
