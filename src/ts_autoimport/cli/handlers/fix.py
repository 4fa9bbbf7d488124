"""
Fix Command Handlers.

This module implements the `ts-autoimport plan` and `ts-autoimport fix`
commands. Both:
1. Load the style configuration (TOML + CLI overrides).
2. Read the target document.
3. Build the candidate from the CLI arguments.
4. Run the planner.

`plan` reports the edit; `fix` applies it and prints or writes the result.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from rich.table import Table

from ts_autoimport.config import StyleConfig
from ts_autoimport.core.document import DocumentText
from ts_autoimport.core.edits import EditPlan, InsertEdit, ReplaceEdit, apply_edit
from ts_autoimport.core.import_fixer import ImportCandidate, ImportFixer, SourceRef
from ts_autoimport.enums import EditKind
from ts_autoimport.utils.console import console, log_error, log_info, log_success, log_warning


def _prepare(
  input_path: Path,
  symbol: str,
  source: str,
  discovered: bool,
  double_quotes: Optional[bool],
  space_between_braces: Optional[bool],
  settings: Dict[str, Any],
) -> Optional[Tuple[DocumentText, EditPlan]]:
  """
  Loads inputs and computes the plan.

  Args:
      input_path: Document to edit.
      symbol: Symbol to import.
      source: Exporting file path, or module specifier if ``discovered``.
      discovered: Treat ``source`` as a ready-to-use specifier.
      double_quotes: Quote style override.
      space_between_braces: Brace padding override.
      settings: Extra ``key=value`` style settings from the CLI.

  Returns:
      Optional[Tuple[DocumentText, EditPlan]]: None if inputs are invalid (already logged).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return None

  try:
    style = StyleConfig.load(
      double_quotes=double_quotes,
      space_between_braces=space_between_braces,
      overrides=settings,
      search_path=input_path.resolve().parent,
    )
  except ValueError as e:
    log_error(str(e))
    return None

  document = DocumentText.from_path(input_path)
  source_path = source if discovered else str(Path(source).resolve())
  candidate = ImportCandidate(symbol_name=symbol, source=SourceRef(path=source_path, discovered=discovered))

  return document, ImportFixer(style).plan(document, [candidate])


def _print_plan_table(document: DocumentText, edit: EditPlan) -> None:
  table = Table(title=f"Import Plan for {Path(document.file_name).name}")
  table.add_column("Kind", style="cyan")
  table.add_column("Location")
  table.add_column("Text", style="code")

  if isinstance(edit, InsertEdit):
    table.add_row(edit.kind.value, f"{edit.position.line}:{edit.position.character}", edit.text.rstrip("\r\n"))
  elif isinstance(edit, ReplaceEdit):
    start, end = edit.range.start, edit.range.end
    table.add_row(
      edit.kind.value,
      f"{start.line}:{start.character}-{end.line}:{end.character}",
      f"<{document.line_count} lines>",
    )
  else:
    table.add_row(edit.kind.value, "-", "-")

  console.print(table)


def handle_plan(
  input_path: Path,
  symbol: str,
  source: str,
  discovered: bool = False,
  double_quotes: Optional[bool] = None,
  space_between_braces: Optional[bool] = None,
  settings: Optional[Dict[str, Any]] = None,
  json_mode: bool = False,
) -> int:
  """
  Handles the 'plan' command execution.

  Args:
      input_path: Document to edit.
      symbol: Symbol to import.
      source: Exporting file path or module specifier.
      discovered: Treat ``source`` as a ready-to-use specifier.
      double_quotes: Quote style override.
      space_between_braces: Brace padding override.
      settings: Extra style settings.
      json_mode: If True, print the plan as JSON instead of a table.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  prepared = _prepare(input_path, symbol, source, discovered, double_quotes, space_between_braces, settings or {})
  if prepared is None:
    return 1
  document, edit = prepared

  if json_mode:
    print(json.dumps(edit.to_dict(), indent=2))
  else:
    _print_plan_table(document, edit)
  return 0


def handle_fix(
  input_path: Path,
  symbol: str,
  source: str,
  discovered: bool = False,
  double_quotes: Optional[bool] = None,
  space_between_braces: Optional[bool] = None,
  settings: Optional[Dict[str, Any]] = None,
  write: bool = False,
) -> int:
  """
  Handles the 'fix' command execution.

  Args:
      input_path: Document to edit.
      symbol: Symbol to import.
      source: Exporting file path or module specifier.
      discovered: Treat ``source`` as a ready-to-use specifier.
      double_quotes: Quote style override.
      space_between_braces: Brace padding override.
      settings: Extra style settings.
      write: Write the result back to ``input_path`` instead of stdout.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  prepared = _prepare(input_path, symbol, source, discovered, double_quotes, space_between_braces, settings or {})
  if prepared is None:
    return 1
  document, edit = prepared

  new_text = apply_edit(document.text, edit)

  if not write:
    sys.stdout.write(new_text)
    return 0

  if edit.kind == EditKind.NOOP:
    log_info(f"'{symbol}' is already imported in [path]{input_path}[/path]")
    return 0

  if new_text == document.text:
    log_warning(f"No matching import statement for the module in [path]{input_path}[/path]; nothing changed")
    return 0

  with open(input_path, "w", encoding="utf-8", newline="") as f:
    f.write(new_text)
  log_success(f"Imported '{symbol}' in [path]{input_path}[/path] ({edit.kind.value})")
  return 0
