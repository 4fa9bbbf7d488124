"""
Import Statement Formatting Mixin.

Renders ``import { X } from 'path';`` in one of the four shapes selected by the
quote and brace-padding flags.
"""

from ts_autoimport.core.import_fixer.utils import get_quote

LINE_TERMINATOR = "\r\n"


class FormattingMixin:
  """
  Mixin emitting import statement text.
  """

  double_quotes: bool
  space_between_braces: bool

  def create_import_statement(self, imports: str, path: str, endline: bool = False) -> str:
    """
    Builds a single-line named import statement.

    Args:
        imports: Comma separated symbol list, inserted as-is between the braces.
        path: Module specifier. Any quote characters in it are dropped.
        endline: Append a CRLF terminator for a standalone inserted line.

    Returns:
        str: The formatted statement.
    """
    formatted_path = path.replace('"', "").replace("'", "")
    quote = get_quote(self.double_quotes)
    body = f"{{ {imports} }}" if self.space_between_braces else f"{{{imports}}}"
    terminator = LINE_TERMINATOR if endline else ""
    return f"import {body} from {quote}{formatted_path}{quote};{terminator}"
