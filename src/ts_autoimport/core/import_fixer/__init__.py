"""
Import Fixer Package.

This package provides the ``ImportFixer`` class, which plans the text edit that
makes a symbol importable in a TypeScript/JavaScript document:
1.  **Resolution**: Deriving the module specifier from the exporting file.
2.  **Deduplication**: Skipping symbols that are already imported.
3.  **Merging**: Extending an existing ``import { ... }`` from the same module.
4.  **Insertion**: Adding a new statement at the top (after a Flow pragma).

It is composed of several mixins handling specific steps.
"""

from ts_autoimport.core.import_fixer.base import BaseImportFixer
from ts_autoimport.core.import_fixer.formatting_mixin import FormattingMixin
from ts_autoimport.core.import_fixer.merge_mixin import MergeMixin
from ts_autoimport.core.import_fixer.paths_mixin import PathMixin
from ts_autoimport.core.import_fixer.planner_mixin import PlannerMixin
from ts_autoimport.core.import_fixer.resolution import ImportCandidate, SourceRef


class ImportFixer(PlannerMixin, MergeMixin, PathMixin, FormattingMixin, BaseImportFixer):
  """
  Composite planner for import edits.

  Inherits functionality from:
  - :class:`PlannerMixin`: public ``plan``/``fix`` orchestration.
  - :class:`MergeMixin`: duplicate detection and statement merging.
  - :class:`PathMixin`: module specifier derivation.
  - :class:`FormattingMixin`: statement rendering.
  - :class:`BaseImportFixer`: Style configuration.
  """


__all__ = ["ImportCandidate", "ImportFixer", "SourceRef"]
