"""
Tests for import statement formatting.

Verifies:
1. The four quote/brace combinations.
2. Line terminator handling for inserted statements.
3. Quote stripping from the path.
"""

import pytest

from ts_autoimport.config import StyleConfig
from ts_autoimport.core.import_fixer import ImportFixer


@pytest.mark.parametrize(
  "double_quotes, spaces, expected",
  [
    (True, True, 'import { Foo } from "./bar";'),
    (True, False, 'import {Foo} from "./bar";'),
    (False, True, "import { Foo } from './bar';"),
    (False, False, "import {Foo} from './bar';"),
  ],
)
def test_style_matrix(double_quotes, spaces, expected):
  fixer = ImportFixer(StyleConfig(double_quotes=double_quotes, space_between_braces=spaces))
  assert fixer.create_import_statement("Foo", "./bar") == expected


def test_endline_appends_crlf(fixer):
  assert fixer.create_import_statement("Foo", "./bar", endline=True) == "import {Foo} from './bar';\r\n"


def test_symbol_list_inserted_verbatim(spaced_fixer):
  assert spaced_fixer.create_import_statement("A, B, C", "./util") == "import { A, B, C } from './util';"


def test_quotes_removed_from_path(fixer):
  """Paths carrying their own quotes are cleaned before wrapping."""
  assert fixer.create_import_statement("Foo", "'./bar\"") == "import {Foo} from './bar';"
