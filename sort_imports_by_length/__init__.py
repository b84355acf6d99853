"""Top-level package for sort-imports-by-length.

This package exposes the core API for checking and fixing the order of
JavaScript and TypeScript import declarations.
"""

from sort_imports_by_length.core import analyze
from sort_imports_by_length.core import canonical_order
from sort_imports_by_length.core import Decision
from sort_imports_by_length.core import Fix
from sort_imports_by_length.core import generate_fixed_code
from sort_imports_by_length.core import iter_source_files
from sort_imports_by_length.core import process_file
from sort_imports_by_length.core import rewrite_imports
from sort_imports_by_length.parser import extract_imports
from sort_imports_by_length.parser import ImportStatement
from sort_imports_by_length.rules import Category
from sort_imports_by_length.rules import classify_import
from sort_imports_by_length.rules import split_imports


__all__ = [
    "Category",
    "ImportStatement",
    "Decision",
    "Fix",
    "classify_import",
    "split_imports",
    "canonical_order",
    "generate_fixed_code",
    "analyze",
    "rewrite_imports",
    "extract_imports",
    "process_file",
    "iter_source_files",
]
