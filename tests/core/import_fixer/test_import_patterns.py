"""
Tests for the shared import statement pattern.
"""

import pytest

from ts_autoimport.core.import_fixer.utils import (
  build_import_pattern,
  extract_symbols,
  find_import_statement,
  has_flow_pragma,
  starts_with_comment,
)


def test_find_single_quoted():
  text = "const x = 1;\nimport { A, B } from './util';\n"
  found = find_import_statement(text, "./util", double_quotes=False)
  assert found is not None
  assert found.statement == "import { A, B } from './util';"
  assert text[found.start : found.end] == found.statement
  assert found.symbols == ["A", "B"]


def test_quote_style_must_match():
  text = 'import { A } from "./util";'
  assert find_import_statement(text, "./util", double_quotes=False) is None
  assert find_import_statement(text, "./util", double_quotes=True) is not None


def test_path_is_matched_literally():
  """Dots in the path are escaped and do not act as wildcards."""
  text = "import { A } from './aXb';"
  assert find_import_statement(text, "./a.b", double_quotes=False) is None


def test_compact_braces_matched():
  found = find_import_statement("import {A,B} from './util';", "./util", False)
  assert found.symbols == ["A", "B"]


def test_multiline_imports_not_matched():
  text = "import {\n  A,\n  B\n} from './util';"
  assert find_import_statement(text, "./util", False) is None


def test_default_import_not_matched():
  assert find_import_statement("import A from './util';", "./util", False) is None


def test_first_statement_wins():
  text = "import { A } from './util';\nimport { B } from './util';"
  found = find_import_statement(text, "./util", False)
  assert found.symbols == ["A"]


def test_pattern_requires_semicolon():
  assert build_import_pattern("./util", False).search("import { A } from './util'") is None


def test_extract_symbols_strips_keywords_case_insensitively():
  """Fragments spelled like keywords are removed from names as well."""
  assert extract_symbols("import { Importer, FromX } from './m';", "./m") == ["er", "X"]


@pytest.mark.parametrize(
  "text, expected",
  [
    ("// header\nimport x", True),
    ("  /* block */", True),
    ("\n\n// late", True),
    ("import { A } from './a';\n// comment", False),
    ("", False),
  ],
)
def test_starts_with_comment(text, expected):
  assert starts_with_comment(text) is expected


@pytest.mark.parametrize(
  "text, expected",
  [
    ("/* @flow */\nimport x", True),
    ("// @flow\n", True),
    ("//* @flow\n", True),
    ("/*@flow*/", True),
    ("\n/* @flow */", False),
    ("/* flow */", False),
    ("const a = 1;", False),
  ],
)
def test_flow_pragma(text, expected):
  assert has_flow_pragma(text) is expected


@pytest.mark.parametrize("separator", ["\r", "\n", "\r\n", "\u2028", "\u2029"])
def test_statement_does_not_span_line_breaks(separator):
  """An earlier import on another line is never pulled into the match."""
  text = f"import {{A}} from './a';{separator}import {{B}} from './util';{separator}"
  found = find_import_statement(text, "./util", double_quotes=False)
  assert found.statement == "import {B} from './util';"
  assert found.symbols == ["B"]
