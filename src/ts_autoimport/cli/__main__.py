"""
Main Entry Point for ts-autoimport CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `ts_autoimport.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ts_autoimport import __version__
from ts_autoimport.cli import commands
from ts_autoimport.config import parse_cli_key_values
from ts_autoimport.utils.console import log_error, set_verbose


def _add_common_arguments(cmd: argparse.ArgumentParser) -> None:
  cmd.add_argument("path", type=Path, help="Document to add the import to")
  cmd.add_argument("--symbol", required=True, help="Name of the symbol to import")
  cmd.add_argument("--source", required=True, help="File exporting the symbol (or module specifier with --discovered)")
  cmd.add_argument(
    "--discovered",
    action="store_true",
    help="Use --source verbatim as the module specifier instead of a file path",
  )
  cmd.add_argument(
    "--double-quotes",
    action=argparse.BooleanOptionalAction,
    default=None,
    help="Quote module paths with double quotes (Overrides config)",
  )
  cmd.add_argument(
    "--space-between-braces",
    action=argparse.BooleanOptionalAction,
    default=None,
    help="Emit '{ X }' instead of '{X}' (Overrides config)",
  )
  cmd.add_argument(
    "--config",
    nargs="*",
    help="Style settings in key=value format (e.g. doubleQuotes=true)",
  )


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="ts-autoimport: Import statement planner for TypeScript/JavaScript")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show planner debug logs")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: PLAN ---
  cmd_plan = subparsers.add_parser("plan", help="Show the edit that would import a symbol")
  _add_common_arguments(cmd_plan)
  cmd_plan.add_argument("--json", action="store_true", help="Print the edit as JSON")

  # --- Command: FIX ---
  cmd_fix = subparsers.add_parser("fix", help="Apply the import edit")
  _add_common_arguments(cmd_fix)
  cmd_fix.add_argument("--write", action="store_true", help="Rewrite the file in place instead of printing it")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  try:
    settings = parse_cli_key_values(args.config)
  except ValueError as e:
    log_error(str(e))
    return 1

  common = dict(
    discovered=args.discovered,
    double_quotes=args.double_quotes,
    space_between_braces=args.space_between_braces,
    settings=settings,
  )

  if args.command == "plan":
    return commands.handle_plan(args.path, args.symbol, args.source, json_mode=args.json, **common)

  elif args.command == "fix":
    return commands.handle_fix(args.path, args.symbol, args.source, write=args.write, **common)

  return 0


if __name__ == "__main__":
  sys.exit(main())
