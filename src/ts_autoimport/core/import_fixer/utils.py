"""
Utilities for the Import Fixer.

Contains the single-line named-import pattern shared by the duplicate check and
the merge step, together with the small text predicates the planner needs.

Only the canonical shape ``import { A, B } from './path';`` is recognised. The
braces may hold anything on one line; default, namespace and multi-line imports
are never matched.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

# Leading Flow pragma: `// @flow`, `/* @flow */` and the legacy `//* @flow`.
FLOW_PRAGMA = re.compile(r"^/(?:/\*|/|\*) *@flow")

# Tokens removed from a matched statement to recover the symbol list.
# Case-insensitive, so symbols spelled with FROM/Import fragments are mangled too.
_STRIP_TOKENS = re.compile(r"{|}|from|import|'|\"| |;", re.IGNORECASE)

COMMENT_OPENERS = ("//", "/*")

# Characters up to the next line break; \r, U+2028 and U+2029 count as breaks too.
_SAME_LINE = r"[^\r\n\u2028\u2029]*"


@dataclass(frozen=True)
class ImportMatch:
  """
  A located import statement.

  Attributes:
      start: Offset of the first character of the statement.
      end: Offset one past the terminating semicolon.
      statement: The matched text.
      symbols: Imported names recovered from the statement.
  """

  start: int
  end: int
  statement: str
  symbols: List[str]


def get_quote(double_quotes: bool) -> str:
  """Returns the quote character for the configured style."""
  return '"' if double_quotes else "'"


def build_import_pattern(relative_path: str, double_quotes: bool) -> Pattern[str]:
  """
  Compiles the pattern for a named import from ``relative_path``.

  Args:
      relative_path (str): Module specifier, matched literally.
      double_quotes (bool): Match ``"path"`` instead of ``'path'``.

  Returns:
      Pattern[str]: The compiled expression.
  """
  quote = get_quote(double_quotes)
  return re.compile(r"import \{" + _SAME_LINE + r"\} from " + quote + re.escape(relative_path) + quote + ";")


def extract_symbols(statement: str, relative_path: str) -> List[str]:
  """
  Recovers the imported names from a matched statement.

  The statement is reduced by deleting braces, keywords, quotes, spaces and
  semicolons, then the first occurrence of the path is removed and the rest is
  split on commas. Names are not validated or deduplicated.

  Args:
      statement (str): Text matched by :func:`build_import_pattern`.
      relative_path (str): The module specifier of the statement.

  Returns:
      List[str]: The imported names, in source order.
  """
  working = _STRIP_TOKENS.sub("", statement).replace(relative_path, "", 1)
  return working.split(",")


def find_import_statement(text: str, relative_path: str, double_quotes: bool) -> Optional[ImportMatch]:
  """
  Locates the first named import from ``relative_path`` in ``text``.

  Args:
      text (str): Document content.
      relative_path (str): Module specifier to look for.
      double_quotes (bool): Quote style of the statement.

  Returns:
      Optional[ImportMatch]: The match, or None if no statement is present.
  """
  match = build_import_pattern(relative_path, double_quotes).search(text)
  if not match:
    return None
  statement = match.group(0)
  return ImportMatch(
    start=match.start(),
    end=match.end(),
    statement=statement,
    symbols=extract_symbols(statement, relative_path),
  )


def starts_with_comment(text: str) -> bool:
  """
  Checks whether the whole document opens with a line or block comment.

  Only the very start of the text is inspected, not the line holding an import.

  Args:
      text (str): Document content.

  Returns:
      bool: True if the trimmed text begins with ``//`` or ``/*``.
  """
  return text.lstrip().lstrip("\ufeff").lstrip()[:2] in COMMENT_OPENERS


def has_flow_pragma(text: str) -> bool:
  """Returns True if the document starts with a Flow ``@flow`` pragma comment."""
  return FLOW_PRAGMA.search(text) is not None
