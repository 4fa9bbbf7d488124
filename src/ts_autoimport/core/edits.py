"""
Edit Plan Value Types.

The planner never mutates a document. It describes the change as one of three
variants which the host (an editor, or the CLI in this package) applies:

- :class:`NoOpEdit`: nothing to do, the import is already present.
- :class:`InsertEdit`: insert text at a ``(line, character)`` position.
- :class:`ReplaceEdit`: replace a range (the whole document for merges).

:func:`apply_edit` reproduces the editor's application semantics so that plans
can be executed and verified without a live editor.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from ts_autoimport.enums import EditKind

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Position:
  """Zero-based line/character position inside a document."""

  line: int
  character: int = 0

  def to_dict(self) -> Dict[str, int]:
    return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class TextRange:
  """Half-open range between two positions."""

  start: Position
  end: Position

  def to_dict(self) -> Dict[str, Any]:
    return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class NoOpEdit:
  """The document already imports the requested symbol."""

  kind: EditKind = field(default=EditKind.NOOP, init=False)

  def to_dict(self) -> Dict[str, Any]:
    return {"kind": self.kind.value}


@dataclass(frozen=True)
class InsertEdit:
  """Insert a freestanding import statement at ``position``."""

  position: Position
  text: str
  kind: EditKind = field(default=EditKind.INSERT, init=False)

  def to_dict(self) -> Dict[str, Any]:
    return {"kind": self.kind.value, "position": self.position.to_dict(), "text": self.text}


@dataclass(frozen=True)
class ReplaceEdit:
  """Replace the text covered by ``range`` with ``text``."""

  range: TextRange
  text: str
  kind: EditKind = field(default=EditKind.REPLACE, init=False)

  def to_dict(self) -> Dict[str, Any]:
    return {"kind": self.kind.value, "range": self.range.to_dict(), "text": self.text}


EditPlan = Union[NoOpEdit, InsertEdit, ReplaceEdit]


def _line_spans(text: str) -> List[Dict[str, int]]:
  """
  Computes the start offset and content end offset of every line.

  Args:
      text (str): The document text.

  Returns:
      List[Dict[str, int]]: One ``{"start", "end"}`` entry per line, where ``end``
      excludes the line terminator.
  """
  spans = []
  start = 0
  for match in _LINE_BREAK.finditer(text):
    spans.append({"start": start, "end": match.start()})
    start = match.end()
  spans.append({"start": start, "end": len(text)})
  return spans


def offset_at(text: str, position: Position) -> int:
  """
  Converts a position into a string offset.

  Positions past the last line resolve to the end of the text, and characters
  past the end of a line resolve to the end of that line.

  Args:
      text (str): The document text.
      position (Position): The position to convert.

  Returns:
      int: Offset into ``text``.
  """
  spans = _line_spans(text)
  if position.line >= len(spans):
    return len(text)
  span = spans[max(position.line, 0)]
  return min(span["start"] + max(position.character, 0), span["end"])


def apply_edit(text: str, edit: EditPlan) -> str:
  """
  Applies an edit plan to a document text.

  Args:
      text (str): The document snapshot the plan was computed against.
      edit (EditPlan): The plan returned by the planner.

  Returns:
      str: The resulting document text.

  Raises:
      TypeError: If ``edit`` is not one of the edit variants.
  """
  if isinstance(edit, NoOpEdit):
    return text

  if isinstance(edit, InsertEdit):
    offset = offset_at(text, edit.position)
    return text[:offset] + edit.text + text[offset:]

  if isinstance(edit, ReplaceEdit):
    start = offset_at(text, edit.range.start)
    end = offset_at(text, edit.range.end)
    return text[:start] + edit.text + text[end:]

  raise TypeError(f"Unsupported edit type: {type(edit).__name__}")
