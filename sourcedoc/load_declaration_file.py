"""Logic for loading declaration record files."""

from pathlib import Path
from typing import Any

import yaml


def load_declaration_file(path: Path) -> Any:
    """Load and parse a YAML or JSON declaration file."""
    # JSON output of the introspection tool is valid YAML.
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    return doc or []
