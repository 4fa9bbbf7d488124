"""
Base Import Fixer Logic.

Defines the base class for the ImportFixer, holding the formatting
configuration read once at construction.
"""

from typing import Optional

from ts_autoimport.config import StyleConfig


class BaseImportFixer:
  """
  Base class for import planning.

  Keeps the style flags for the lifetime of the instance. No per-request state
  is stored, so a single fixer can serve any number of documents.
  """

  def __init__(self, style: Optional[StyleConfig] = None):
    """
    Initializes the fixer state.

    Args:
        style: Formatting options. Defaults to single quotes without brace padding.
    """
    self.style = style or StyleConfig()
    self.double_quotes = self.style.double_quotes
    self.space_between_braces = self.style.space_between_braces
