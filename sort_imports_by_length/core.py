#!/usr/bin/env python3
"""Core utilities for sort-imports-by-length. This module
groups import declarations, sorts each group by the length of its source text,
detects when a file's imports deviate from that canonical order, and rewrites
the import block when asked to.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Callable
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

from sort_imports_by_length.parser import extract_imports
from sort_imports_by_length.parser import ImportStatement
from sort_imports_by_length.rules import Category
from sort_imports_by_length.rules import classify_import
from sort_imports_by_length.rules import split_imports

LOG = logging.getLogger(__name__)

MESSAGE = "Imports are not sorted correctly."
DEFAULT_EXTENSIONS = (".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx", ".mts", ".cts")

TextGetter = Callable[[ImportStatement], str]


def rendered_text(statement: ImportStatement) -> str:
    """Default text accessor: the statement's own source text."""
    return statement.rendered_text


@dataclass(frozen=True)
class Fix:
    """Replace ``source[start:end]`` with ``text``."""

    start: int
    end: int
    text: str


@dataclass(frozen=True)
class Decision:
    """Outcome of analyzing one file's import list.

    A compliant decision carries nothing else. A violation names the first
    statement found out of place, the message to report and the fix that
    replaces the whole import block.
    """

    compliant: bool
    anchor: Optional[ImportStatement] = None
    message: Optional[str] = None
    fix: Optional[Fix] = None

    @property
    def canonical_text(self) -> Optional[str]:
        return self.fix.text if self.fix else None


COMPLIANT = Decision(compliant=True)


def canonical_order(statements: Sequence[ImportStatement],
                    get_text: TextGetter = rendered_text) -> List[ImportStatement]:
    """Return ``statements`` grouped by category, each group sorted by length.

    ``sorted`` is stable, so statements of equal length keep their input
    order. Unclassified statements are not sorted.
    """
    ordered: List[ImportStatement] = []
    for category, group in split_imports(statements):
        if category is Category.UNCLASSIFIED:
            ordered.extend(group)
        else:
            ordered.extend(sorted(group, key=lambda stmt: len(get_text(stmt))))
    return ordered


def generate_fixed_code(ordered: Sequence[ImportStatement],
                        get_text: TextGetter = rendered_text,
                        newline: str = "\n") -> str:
    """Render statements one per line with a blank line between categories."""
    code = ""
    current_category: Optional[Category] = None
    for index, statement in enumerate(ordered):
        category = classify_import(statement)
        if index and category != current_category:
            code += newline
        code += get_text(statement) + newline
        current_category = category
    return code.strip()


def analyze(statements: Sequence[ImportStatement],
            get_text: TextGetter = rendered_text,
            newline: str = "\n") -> Decision:
    """Check whether ``statements`` are in canonical order.

    Args:
        statements: A file's import declarations in source order.
        get_text: Returns the source text of a statement.
        newline: Line break used in the replacement text.

    Returns:
        ``COMPLIANT``, or a violation ``Decision`` whose fix spans from the
        start of the first import to the end of the last one.
    """
    if len(statements) < 2:
        return COMPLIANT

    ordered = canonical_order(statements, get_text)
    for original, expected in zip(statements, ordered):
        if original is not expected:
            # One report per file: the fix rewrites the whole block anyway.
            LOG.debug("First misplaced import: %r", get_text(original))
            fix = Fix(
                start=statements[0].start,
                end=statements[-1].end,
                text=generate_fixed_code(ordered, get_text, newline),
            )
            return Decision(compliant=False, anchor=original, message=MESSAGE, fix=fix)
    return COMPLIANT


def rewrite_imports(source: str, fix: Fix) -> str:
    """Replace ``source[fix.start:fix.end]`` with ``fix.text``."""
    return source[:fix.start] + fix.text + source[fix.end:]


def process_file(file_path: str, apply: bool = False) -> Tuple[bool, List[Tuple[int, str]]]:
    """Check a single source file and optionally fix its import order.

    Returns (modified, warnings). ``modified`` is True when the imports were
    rewritten, or would be when ``apply`` is False.
    """
    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        return False, [(0, f"Could not read file: {e}")]

    statements = extract_imports(source)
    LOG.debug("Found %d imports in %s", len(statements), file_path)

    # Keep the file's own line endings in the rewritten block.
    decision = analyze(statements, newline="\r\n" if "\r\n" in source else "\n")
    if decision.compliant:
        return False, []

    warnings: List[Tuple[int, str]] = [(decision.anchor.lineno, decision.message)]
    if apply:
        try:
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                f.write(rewrite_imports(source, decision.fix))
        except OSError as e:
            warnings.append((0, f"Could not write file: {e}"))
            return False, warnings
    return True, warnings


def iter_source_files(root: str,
                      extensions: Iterable[str] = DEFAULT_EXTENSIONS,
                      ignore: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Yield JavaScript/TypeScript files under ``root``, excluding ignored prefixes."""
    suffixes = set(extensions)
    ignore_set = set(ignore or [])
    root_path = Path(root)
    for path in sorted(root_path.rglob("*")):
        if not path.is_file() or path.suffix not in suffixes:
            continue
        if "node_modules" in path.relative_to(root_path).parts:
            continue
        if any(str(path).startswith(str(root_path / pattern)) for pattern in ignore_set):
            continue
        yield path
