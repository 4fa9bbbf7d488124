"""
Import Planning Mixin.

Orchestrates path derivation, duplicate detection, merging and formatting into
a single edit plan for the host to apply.
"""

import logging
from typing import Sequence

from ts_autoimport.core.document import DocumentText
from ts_autoimport.core.edits import (
  EditPlan,
  InsertEdit,
  NoOpEdit,
  Position,
  ReplaceEdit,
  TextRange,
  apply_edit,
)
from ts_autoimport.core.import_fixer.resolution import ImportCandidate
from ts_autoimport.core.import_fixer.utils import has_flow_pragma

logger = logging.getLogger(__name__)


class PlannerMixin:
  """
  Mixin exposing the public planning operations.
  """

  def plan(self, document: DocumentText, candidates: Sequence[ImportCandidate]) -> EditPlan:
    """
    Computes the edit that makes ``candidates[0]`` importable in ``document``.

    Only the first candidate is considered.

    Args:
        document: Snapshot of the target document.
        candidates: Ordered candidates from the symbol lookup. Must not be empty.

    Returns:
        EditPlan: ``NoOpEdit`` if already imported, a whole-document ``ReplaceEdit``
        when merging, otherwise an ``InsertEdit`` of a new statement.

    Raises:
        ValueError: If ``candidates`` is empty.
    """
    if not candidates:
      raise ValueError("No import candidates supplied")

    candidate = candidates[0]
    import_name = candidate.symbol_name
    relative_path = self.derive_module_path(document, candidate.source)

    if self.already_resolved(document, relative_path, import_name):
      logger.debug("'%s' already imported from '%s'", import_name, relative_path)
      return NoOpEdit()

    if self.should_merge_import(document, relative_path):
      logger.debug("Merging '%s' into import from '%s'", import_name, relative_path)
      full_range = TextRange(Position(0, 0), Position(document.line_count, 0))
      return ReplaceEdit(full_range, self.merge_imports(document, import_name, relative_path))

    line = 1 if has_flow_pragma(document.text) else 0
    logger.debug("Inserting import of '%s' from '%s' at line %d", import_name, relative_path, line)
    return InsertEdit(Position(line, 0), self.create_import_statement(import_name, relative_path, endline=True))

  def fix(self, document: DocumentText, candidates: Sequence[ImportCandidate]) -> str:
    """
    Plans the import and applies it to the document text.

    Args:
        document: Snapshot of the target document.
        candidates: Ordered candidates from the symbol lookup.

    Returns:
        str: The new document text.
    """
    return apply_edit(document.text, self.plan(document, candidates))
