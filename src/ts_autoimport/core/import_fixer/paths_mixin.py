"""
Module Path Mixin.

Turns a candidate's source into the module specifier written in the import.

Discovered sources are used verbatim. File sources are made relative to the
document's directory and normalized:

1.  ``./`` is prepended unless already present (``../lib/x`` becomes ``./../lib/x``).
2.  Backslashes become forward slashes on Windows.
3.  Everything from the last ``.`` onward is cut. The cut is taken over the
    whole path, so ``./v1.2/index.ts`` yields ``./v1`` and ``./index`` yields
    an empty string.
"""

import logging
import os
import sys

from ts_autoimport.core.document import DocumentText
from ts_autoimport.core.import_fixer.resolution import SourceRef

logger = logging.getLogger(__name__)

RELATIVE_PREFIX = "./"


def is_windows_platform() -> bool:
  """Returns True when running on a Windows host."""
  return sys.platform.startswith("win")


class PathMixin:
  """
  Mixin deriving canonical relative module paths.
  """

  def get_relative_path(self, document: DocumentText, source: SourceRef) -> str:
    """
    Computes the raw path from the document's directory to the source.

    Args:
        document: The document receiving the import.
        source: The exporting module.

    Returns:
        str: The specifier for discovered sources, a filesystem relative path otherwise.
    """
    if source.discovered:
      return source.path

    base_dir = os.path.dirname(document.file_name)
    try:
      return os.path.relpath(source.path, base_dir)
    except ValueError:
      # Different drives on Windows have no relative path.
      logger.debug("No relative path from %s to %s", base_dir, source.path)
      return source.path

  def normalise_relative_path(self, source: SourceRef, relative_path: str) -> str:
    """
    Normalizes a raw relative path into a module specifier.

    Args:
        source: The exporting module; discovered sources are returned untouched.
        relative_path: Output of :meth:`get_relative_path`.

    Returns:
        str: The module specifier.
    """
    if source.discovered:
      return relative_path

    if not relative_path.startswith(RELATIVE_PREFIX):
      relative_path = RELATIVE_PREFIX + relative_path

    if is_windows_platform():
      relative_path = relative_path.replace("\\", "/")

    return _remove_file_extension(relative_path)

  def derive_module_path(self, document: DocumentText, source: SourceRef) -> str:
    """Shortcut for :meth:`get_relative_path` followed by :meth:`normalise_relative_path`."""
    return self.normalise_relative_path(source, self.get_relative_path(document, source))


def _remove_file_extension(path: str) -> str:
  dot = path.rfind(".")
  return path[:dot] if dot >= 0 else ""
