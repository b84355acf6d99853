from sort_imports_by_length.parser import extract_imports
from sort_imports_by_length.parser import extract_imports_from_file

SOURCE = (
    "import React from 'react';\n"
    "import {\n"
    "  a,\n"
    "  b,\n"
    "} from \"./local\";\n"
    "import type { T } from '../types';\n"
    "import './styles.css';\n"
    "import data from './data.json' with { type: 'json' };\n"
    "\n"
    "const lazy = import('lazy');\n"
    "console.log(import.meta.url);\n"
)


def test_extract_imports_finds_declarations():
    imports = extract_imports(SOURCE)
    assert [i.source_path for i in imports] == [
        "react",
        "./local",
        "../types",
        "./styles.css",
        "./data.json",
    ]
    assert [i.is_type_only for i in imports] == [False, False, True, False, False]
    assert [i.lineno for i in imports] == [1, 2, 6, 7, 8]


def test_extract_imports_offsets_match_rendered_text():
    for statement in extract_imports(SOURCE):
        assert SOURCE[statement.start:statement.end] == statement.rendered_text

    first, second = extract_imports(SOURCE)[:2]
    assert first.rendered_text == "import React from 'react';"
    assert second.rendered_text == 'import {\n  a,\n  b,\n} from "./local";'
    assert second.start == len("import React from 'react';\n")


def test_default_import_named_type_is_not_type_only():
    (statement,) = extract_imports("import type from 'typed-lib';\n")
    assert statement.source_path == "typed-lib"
    assert not statement.is_type_only


def test_ignores_non_declarations():
    source = (
        "const x = 'import y from \"z\"';\n"
        "export { a } from './a';\n"
        "import fs = require('fs');\n"
        "await import('./dynamic');\n"
    )
    assert extract_imports(source) == []


def test_statement_without_semicolon():
    (statement,) = extract_imports("import * as path from 'path'\nfoo()\n")
    assert statement.rendered_text == "import * as path from 'path'"


def test_extract_imports_from_file(tmp_path):
    file = tmp_path / "sample.ts"
    file.write_text("import a from 'a';\nimport b from './b';\n", encoding="utf-8")
    imports = extract_imports_from_file(str(file))
    assert len(imports) == 2


def test_block_stops_at_first_non_import_code():
    source = (
        "import b from './b';\n"
        "import a from 'a';\n"
        "\n"
        "function keep() { return 1; }\n"
        "const tpl = `\n"
        "import z from 'zz'\n"
        "`;\n"
    )
    imports = extract_imports(source)
    assert [i.source_path for i in imports] == ["./b", "a"]


def test_imports_after_interleaved_code_are_not_part_of_block():
    source = "import b from './b';\njest.mock('./b');\nimport a from 'a';\n"
    assert [i.source_path for i in extract_imports(source)] == ["./b"]


def test_block_after_header_comments_and_directives():
    source = (
        "#!/usr/bin/env node\n"
        "/**\n"
        " * import fake from 'fake';\n"
        " */\n"
        "// entry point\n"
        "'use strict';\n"
        "import a from 'a';\n"
    )
    (statement,) = extract_imports(source)
    assert statement.source_path == "a"
    assert statement.lineno == 7


def test_path_may_contain_the_other_quote():
    source = "import x from \"it's\";\nimport y from 'say \"hi\"';\n"
    assert [i.source_path for i in extract_imports(source)] == ["it's", 'say "hi"']


def test_extract_imports_from_file_keeps_crlf(tmp_path):
    file = tmp_path / "win.ts"
    file.write_bytes(b"import {\r\n  a,\r\n} from 'a';\r\nimport b from 'b';\r\n")
    first, second = extract_imports_from_file(str(file))
    assert first.rendered_text == "import {\r\n  a,\r\n} from 'a';"
    assert second.start == first.end + 2
