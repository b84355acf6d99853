#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="sort-imports-by-length",
    version="0.1.0",
    packages=["sort_imports_by_length"],
    python_requires=">=3.11",
    install_requires=[
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sibl = sort_imports_by_length.cli:main",
        ],
    },
    author="",
    description="Command-line tool to group JavaScript/TypeScript imports and sort each group by line length",
    license="MIT",
)
