"""
Document Snapshot.

An immutable view of the file being edited: its text, its path and its line
count. The planner reads it, never writes it.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def count_lines(text: str) -> int:
  """
  Counts lines the way an editor does (an empty text has one line).

  Args:
      text (str): Document content.

  Returns:
      int: Number of lines.
  """
  return len(_LINE_BREAK.findall(text)) + 1


@dataclass(frozen=True)
class DocumentText:
  """
  Snapshot of a target document.

  Attributes:
      text: Full current text.
      file_name: Absolute path of the document on disk.
      line_count: Number of lines. Derived from ``text`` when omitted or negative.
  """

  text: str
  file_name: str
  line_count: int = -1

  def __post_init__(self) -> None:
    if self.line_count < 0:
      object.__setattr__(self, "line_count", count_lines(self.text))

  @classmethod
  def from_path(cls, path: Union[str, Path]) -> "DocumentText":
    """
    Reads a document from disk, preserving its line terminators.

    Args:
        path: Location of the file.

    Returns:
        DocumentText: The snapshot.
    """
    file_path = Path(path).resolve()
    with open(file_path, "r", encoding="utf-8", newline="") as f:
      text = f.read()
    return cls(text=text, file_name=str(file_path))
