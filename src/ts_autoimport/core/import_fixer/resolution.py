"""
Import Candidate Types.

Candidates are produced by a symbol lookup outside this package. Each one names
a symbol and where it is exported from; the source is either a ready-to-use
module specifier (``discovered``) or an absolute file path that still has to be
made relative to the document.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class SourceRef:
  """
  Location of the module exporting a symbol.

  Attributes:
      path: Module specifier when ``discovered``, absolute file path otherwise.
      discovered: True if ``path`` can be used verbatim in an import statement.
  """

  path: str
  discovered: bool = False


@dataclass(frozen=True)
class ImportCandidate:
  """A symbol proposed for import together with its exporting source."""

  symbol_name: str
  source: SourceRef

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> "ImportCandidate":
    """
    Builds a candidate from a symbol database record.

    Accepts the record shape ``{"name": ..., "file": {"fsPath": ..., "discovered": ...}}``
    as well as the flat ``{"name": ..., "path": ..., "discovered": ...}`` form.

    Args:
        data (Dict[str, Any]): The raw record.

    Returns:
        ImportCandidate: The parsed candidate.
    """
    file_info = data.get("file")
    if isinstance(file_info, dict):
      path = file_info.get("fsPath") or file_info.get("path") or ""
      discovered = bool(file_info.get("discovered", False))
    else:
      path = data.get("path") or file_info or ""
      discovered = bool(data.get("discovered", False))
    return cls(symbol_name=data["name"], source=SourceRef(path=str(path), discovered=discovered))
