"""Rules module for sort-imports-by-length.

This module defines the ordered import categories and the rules that assign an
import statement to one of them.

The rules are evaluated top to bottom and the first match wins, so the
predicates may overlap without an import ever landing in two groups.
"""

import enum
import logging
import re
from typing import Callable, List, Tuple

LOG = logging.getLogger(__name__)


class Category(enum.IntEnum):
    """Import categories in the order their groups are emitted."""

    THIRD_PARTY = 0
    SCOPED = 1
    SINGLE_DOT_RELATIVE = 2
    MULTI_DOT_RELATIVE = 3
    TYPE_ONLY = 4
    UNCLASSIFIED = 5


_THIRD_PARTY_RE = re.compile(r"^[^./@]")
_SCOPED_RE = re.compile(r"^@")
_SINGLE_DOT_RE = re.compile(r"^\.(?:/|[^./])")
_MULTI_DOT_RE = re.compile(r"^\.\.?/")


def is_third_party(import_path: str) -> bool:
    return bool(_THIRD_PARTY_RE.match(import_path))


def is_scoped(import_path: str) -> bool:
    return bool(_SCOPED_RE.match(import_path))


def is_single_dot_relative(import_path: str) -> bool:
    """Match ``./x`` and ``.x`` but never ``../x``."""
    return bool(_SINGLE_DOT_RE.match(import_path))


def is_multi_dot_relative(import_path: str) -> bool:
    return bool(_MULTI_DOT_RE.match(import_path))


# (category, predicate over the statement), first match wins.
RULES: List[Tuple[Category, Callable]] = [
    (Category.THIRD_PARTY, lambda stmt: is_third_party(stmt.source_path)),
    (Category.SCOPED, lambda stmt: is_scoped(stmt.source_path)),
    (Category.SINGLE_DOT_RELATIVE, lambda stmt: is_single_dot_relative(stmt.source_path)),
    (Category.MULTI_DOT_RELATIVE, lambda stmt: is_multi_dot_relative(stmt.source_path)),
    (Category.TYPE_ONLY, lambda stmt: stmt.is_type_only),
]


def classify_import(statement) -> Category:
    """Classify an import statement into its ordering category.

    Args:
        statement: An ``ImportStatement`` (anything exposing ``source_path``
            and ``is_type_only``).

    Returns:
        The first matching ``Category``. A statement that matches no rule is
        ``Category.UNCLASSIFIED``.
    """
    for category, predicate in RULES:
        if predicate(statement):
            return category
    return Category.UNCLASSIFIED


def split_imports(statements) -> List[Tuple[Category, list]]:
    """Split import statements into category groups.

    Args:
        statements: Import statements in source order.

    Returns:
        A list of ``(category, statements)`` pairs in category order. Input
        order is preserved inside each group and empty groups are dropped.
    """
    grouped = {category: [] for category in Category}
    for statement in statements:
        category = classify_import(statement)
        if category is Category.UNCLASSIFIED:
            LOG.warning("Import from %r matches no import group; keeping it last",
                        statement.source_path)
        grouped[category].append(statement)
    return [(category, members) for category, members in grouped.items() if members]
