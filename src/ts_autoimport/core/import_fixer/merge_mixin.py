"""
Import Merge Mixin.

Handles documents that already mention the target module:
1.  **Duplicate detection**: the symbol is already imported from the path.
2.  **Merge decision**: whether to extend an existing statement or insert a new one.
3.  **Merge construction**: rewriting the existing statement with the new symbol appended.

Symbol matching is by substring on the matched statement text, so requesting
``Foo`` when ``FooBar`` is imported from the same path counts as present.
"""

import logging

from ts_autoimport.core.document import DocumentText
from ts_autoimport.core.import_fixer.utils import find_import_statement, starts_with_comment

logger = logging.getLogger(__name__)


class MergeMixin:
  """
  Mixin for detecting and merging existing named imports.
  """

  double_quotes: bool

  def already_resolved(self, document: DocumentText, relative_path: str, import_name: str) -> bool:
    """
    Checks whether ``import_name`` is already imported from ``relative_path``.

    Args:
        document: Current document snapshot.
        relative_path: Module specifier.
        import_name: Requested symbol.

    Returns:
        bool: True if the first matching statement contains the symbol name.
    """
    found = find_import_statement(document.text, relative_path, self.double_quotes)
    return found is not None and import_name in found.statement

  def should_merge_import(self, document: DocumentText, relative_path: str) -> bool:
    """
    Decides between merging into an existing statement and inserting a new one.

    Only the start of the whole document is checked for a comment, not the
    line that mentions the path.

    Args:
        document: Current document snapshot.
        relative_path: Module specifier.

    Returns:
        bool: True to merge.
    """
    text = document.text
    return relative_path in text and not starts_with_comment(text)

  def merge_imports(self, document: DocumentText, name: str, relative_path: str) -> str:
    """
    Appends ``name`` to the existing import statement for ``relative_path``.

    Args:
        document: Current document snapshot.
        name: Symbol to add.
        relative_path: Module specifier of the statement to extend.

    Returns:
        str: The full document text with the statement rewritten, or the
        original text if no matching statement exists.
    """
    text = document.text
    found = find_import_statement(text, relative_path, self.double_quotes)

    if found is None:
      logger.warning(
        "Path '%s' occurs in %s but no matching import statement was found; leaving text unchanged",
        relative_path,
        document.file_name,
      )
      return text

    symbols = found.symbols + [name]
    new_import = self.create_import_statement(", ".join(symbols), relative_path)
    return text[: found.start] + new_import + text[found.end :]
