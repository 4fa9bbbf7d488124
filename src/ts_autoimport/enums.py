"""
Enumerations for ts-autoimport.

This module defines standard enumerations used across the codebase for
edit classification.
"""

from enum import Enum


class EditKind(str, Enum):
  """
  Discriminator for the edit variants produced by the planner.

  Used by the CLI and JSON serialization to tell the variants apart without
  isinstance checks.
  """

  NOOP = "noop"  # Import already present
  INSERT = "insert"  # New statement at a position
  REPLACE = "replace"  # Whole-document replacement (merge)
