"""
Style Configuration Store.

Holds the two formatting toggles used when emitting import statements and
resolves them from ``pyproject.toml`` (``[tool.autoimport]``) with explicit
overrides taking precedence.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

CONFIG_SECTION = "autoimport"
_ALIASES = {"doubleQuotes": "double_quotes", "spaceBetweenBraces": "space_between_braces"}


class StyleConfig(BaseModel):
  """
  Formatting options for generated import statements.

  Immutable once constructed; the planner reads it once and keeps it.
  Accepts both snake_case names and the editor setting names
  (``doubleQuotes``, ``spaceBetweenBraces``). Unknown keys are rejected.
  """

  model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

  double_quotes: bool = Field(False, alias="doubleQuotes", description="Quote module paths with '\"'.")
  space_between_braces: bool = Field(
    False, alias="spaceBetweenBraces", description="Pad the symbol list as '{ X }' instead of '{X}'."
  )

  @classmethod
  def load(
    cls,
    double_quotes: Optional[bool] = None,
    space_between_braces: Optional[bool] = None,
    overrides: Optional[Dict[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "StyleConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Precedence (lowest first): TOML section, ``overrides`` mapping, keyword flags.

    Args:
        double_quotes (Optional[bool]): Override for the quote style.
        space_between_braces (Optional[bool]): Override for brace padding.
        overrides (Optional[Dict]): Additional settings, e.g. parsed CLI ``key=value`` pairs.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        StyleConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the merged settings hold invalid values.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    data = {**_normalise_keys(toml_config), **_normalise_keys(overrides or {})}
    if double_quotes is not None:
      data["double_quotes"] = double_quotes
    if space_between_braces is not None:
      data["space_between_braces"] = space_between_braces

    try:
      return cls.model_validate(data)
    except ValidationError as e:
      raise ValueError(f"Style configuration validation failed: {e}")


def _normalise_keys(settings: Dict[str, Any]) -> Dict[str, Any]:
  """Maps editor setting names onto field names so later sources override earlier ones."""
  return {_ALIASES.get(key, key): value for key, value in settings.items()}


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(CONFIG_SECTION, {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Booleans are recognised case-insensitively; everything else stays a string.

  Args:
      items (Optional[List[str]]): List of raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.

  Raises:
      ValueError: If an item has no '=' separator.
  """
  if not items:
    return {}

  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      raise ValueError(f"Invalid config format: '{item}'. Expected 'key=value'.")

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    final_val: Any = val_str
    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False

    config[key] = final_val

  return config
