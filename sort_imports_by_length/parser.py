"""Parser module for sort-imports-by-length.

This module extracts ES module import declarations from JavaScript and
TypeScript source text. It only recognises where each declaration starts and
ends and which module path it names; it does not validate import syntax.
"""

from dataclasses import dataclass
import re
from typing import List


@dataclass(frozen=True, eq=False)
class ImportStatement:
    """One import declaration in a source file.

    Instances compare by identity, so two declarations with the same text are
    still distinct statements.

    Attributes:
        source_path: The quoted module path, without quotes.
        is_type_only: True for ``import type ...`` declarations.
        rendered_text: Exact source text of the declaration.
        start: Offset of the first character in the source.
        end: Offset one past the last character in the source.
        lineno: 1-based line number of the first character.
    """

    source_path: str
    is_type_only: bool
    rendered_text: str
    start: int
    end: int
    lineno: int = 1


_IMPORT_RE = re.compile(
    r"""
    import\b(?![ \t]*[(.=])
    (?:\s+(?P<type>type)\b(?!\s*(?:from\b|,|=)))?
    (?:\s*(?P<clause>[^'";]*?)\s*\bfrom)?
    \s*(?P<quote>['"])(?P<path>(?:(?!(?P=quote))[^\n])*)(?P=quote)
    (?:\s*(?:with|assert)\s*\{[^{}]*\})?
    (?:[ \t]*;)?
    """,
    re.VERBOSE,
)

# Shebang, comments and directives ('use strict';) that may precede the imports.
_PROLOGUE_RE = re.compile(
    r"""
    (?:\#![^\n]*)?
    (?:
        \s+
        | //[^\n]*
        | /\*.*?\*/
        | (?P<q>['"])use\ [\w ]+(?P=q)[ \t]*;?
    )*
    """,
    re.VERBOSE | re.DOTALL,
)

_WHITESPACE_RE = re.compile(r"\s*")


def extract_imports(source: str) -> List[ImportStatement]:
    """Return the leading block of import declarations in ``source``.

    The block starts after any shebang, comments and directives at the top of
    the file. It ends at the first text that is neither whitespace nor an
    import declaration, so imports further down the file are not returned.

    Args:
        source: JavaScript or TypeScript source text.

    Returns:
        A list of ``ImportStatement`` records, in source order, whose
        ``start``/``end`` offsets index into ``source``.
    """
    imports: List[ImportStatement] = []
    pos = _PROLOGUE_RE.match(source).end()
    while True:
        match = _IMPORT_RE.match(source, pos)
        if match is None:
            break
        start, end = match.span()
        imports.append(
            ImportStatement(
                source_path=match.group("path"),
                is_type_only=match.group("type") is not None,
                rendered_text=match.group(),
                start=start,
                end=end,
                lineno=source.count("\n", 0, start) + 1,
            )
        )
        pos = _WHITESPACE_RE.match(source, end).end()
    return imports


def extract_imports_from_file(file_path: str) -> List[ImportStatement]:
    """Read a source file and return its leading import declarations.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        source = f.read()

    return extract_imports(source)
