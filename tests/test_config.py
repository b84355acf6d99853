from sort_imports_by_length.config import read_config
from sort_imports_by_length.core import DEFAULT_EXTENSIONS


def test_read_config_defaults(tmp_path):
    config = read_config(str(tmp_path))
    assert config.extensions == DEFAULT_EXTENSIONS
    assert config.exclude == []


def test_read_config_from_toml(tmp_path):
    toml = tmp_path / "pyproject.toml"
    toml.write_text(
        '[tool.sort-imports-by-length]\nextensions = ["ts", ".vue"]\nexclude = ["dist"]\n'
    )
    config = read_config(str(tmp_path))
    assert config.extensions == (".ts", ".vue")
    assert config.exclude == ["dist"]


def test_read_config_ignores_broken_toml(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[tool\n")
    config = read_config(str(tmp_path))
    assert config.extensions == DEFAULT_EXTENSIONS
