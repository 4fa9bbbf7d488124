"""
ts-autoimport Package.

Plans the text edit that adds a named import to a TypeScript/JavaScript
document, either as a new statement or merged into an existing
``import { ... } from '...';`` for the same module.

Usage
-----

Simple String Fix
^^^^^^^^^^^^^^^^^

.. code-block:: python

    import ts_autoimport as tai
    text = "import { A } from './util';\\nA();\\n"
    print(tai.fix_import(text, "/app/src/main.ts", "B", "/app/src/util.ts"))
    # import {A, B} from './util';
    # A();

Planner Usage
^^^^^^^^^^^^^

.. code-block:: python

    from ts_autoimport import DocumentText, ImportCandidate, ImportFixer, SourceRef, StyleConfig

    fixer = ImportFixer(StyleConfig(double_quotes=True, space_between_braces=True))
    doc = DocumentText(text="", file_name="/app/src/main.ts")
    edit = fixer.plan(doc, [ImportCandidate("Button", SourceRef("/app/src/Button.tsx"))])
    print(edit.to_dict())
"""

from typing import Optional

from ts_autoimport.config import StyleConfig
from ts_autoimport.core.document import DocumentText
from ts_autoimport.core.edits import EditPlan, InsertEdit, NoOpEdit, ReplaceEdit, apply_edit
from ts_autoimport.core.import_fixer import ImportCandidate, ImportFixer, SourceRef

__version__ = "0.0.1"


def plan_import(
  text: str,
  file_name: str,
  symbol: str,
  source: str,
  discovered: bool = False,
  style: Optional[StyleConfig] = None,
) -> EditPlan:
  """
  Computes the edit importing ``symbol`` into a document.

  Args:
      text (str): Current document text.
      file_name (str): Absolute path of the document.
      symbol (str): Name to import.
      source (str): Absolute path of the exporting file, or a module specifier
                    when ``discovered`` is True.
      discovered (bool): Use ``source`` verbatim as the module specifier.
      style (StyleConfig, optional): Formatting options. Defaults to
          single quotes without brace padding.

  Returns:
      EditPlan: The edit to apply.
  """
  document = DocumentText(text=text, file_name=file_name)
  candidate = ImportCandidate(symbol_name=symbol, source=SourceRef(path=source, discovered=discovered))
  return ImportFixer(style).plan(document, [candidate])


def fix_import(
  text: str,
  file_name: str,
  symbol: str,
  source: str,
  discovered: bool = False,
  style: Optional[StyleConfig] = None,
) -> str:
  """
  Same as :func:`plan_import`, but returns the edited text.

  Returns:
      str: The document text after applying the edit.
  """
  return apply_edit(text, plan_import(text, file_name, symbol, source, discovered, style))


__all__ = [
  "DocumentText",
  "EditPlan",
  "ImportCandidate",
  "ImportFixer",
  "InsertEdit",
  "NoOpEdit",
  "ReplaceEdit",
  "SourceRef",
  "StyleConfig",
  "apply_edit",
  "fix_import",
  "plan_import",
  "__version__",
]
