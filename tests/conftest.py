"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Style configuration fixtures covering the four output shapes.
- Console isolation so logging tests do not leak handlers.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'ts_autoimport' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ts_autoimport.config import StyleConfig
from ts_autoimport.core.document import DocumentText
from ts_autoimport.core.import_fixer import ImportCandidate, ImportFixer, SourceRef
from ts_autoimport.utils.console import reset_console

DOC_PATH = "/project/src/main.ts"


@pytest.fixture(autouse=True)
def clean_console():
  """Ensures console and logging level are restored after every test."""
  yield
  reset_console()


@pytest.fixture
def fixer() -> ImportFixer:
  """Planner with the default style: single quotes, no brace padding."""
  return ImportFixer(StyleConfig())


@pytest.fixture
def spaced_fixer() -> ImportFixer:
  """Planner emitting `import { X } from './x';`."""
  return ImportFixer(StyleConfig(space_between_braces=True))


@pytest.fixture
def make_doc():
  """Factory building a document located at /project/src/main.ts."""

  def _make(text: str, file_name: str = DOC_PATH) -> DocumentText:
    return DocumentText(text=text, file_name=file_name)

  return _make


@pytest.fixture
def candidate():
  """Factory building a candidate from a symbol and an absolute file path."""

  def _make(name: str, path: str, discovered: bool = False) -> ImportCandidate:
    return ImportCandidate(symbol_name=name, source=SourceRef(path=path, discovered=discovered))

  return _make
