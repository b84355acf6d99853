from dataclasses import dataclass, field
import logging
from pathlib import Path
import tomllib

from sort_imports_by_length.core import DEFAULT_EXTENSIONS

LOG = logging.getLogger(__name__)

TOOL_NAME = "sort-imports-by-length"


@dataclass
class Config:
    extensions: tuple = DEFAULT_EXTENSIONS
    exclude: list = field(default_factory=list)


def read_config(root: str) -> Config:
    """Read ``[tool.sort-imports-by-length]`` from pyproject.toml or use defaults."""
    root = Path(root)
    config = Config()

    toml_path = root / "pyproject.toml"
    if not toml_path.exists():
        return config

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        LOG.warning("Ignoring %s: %s", toml_path, e)
        return config

    section = data.get("tool", {}).get(TOOL_NAME, {})
    extensions = section.get("extensions")
    if extensions:
        config.extensions = tuple(ext if ext.startswith(".") else f".{ext}" for ext in extensions)
    config.exclude = list(section.get("exclude", []))
    return config
