"""Logic for collecting declaration records from every input file."""

import logging
from pathlib import Path
from typing import Any

from sourcedoc.iter_declaration_records import iter_declaration_records
from sourcedoc.load_declaration_file import load_declaration_file

logger = logging.getLogger(__name__)

RECORD_SUFFIXES = (".json", ".yml", ".yaml")


def build_records(files: list[Path]) -> list[dict[str, Any]]:
    """Read all files, in order, into one flat record list.

    Record ids must be unique across files.
    """
    records: list[dict[str, Any]] = []
    for f in files:
        count = 0
        for it in iter_declaration_records(load_declaration_file(f)):
            records.append(it)
            count += 1
        logger.debug("Read %d records from %s", count, f)
    logger.info(
        "Loaded %d declaration records from %d files", len(records), len(files)
    )
    return records


def find_record_files(root: Path) -> list[Path]:
    """Return declaration files under ``root`` in a stable order."""
    return sorted(p for p in root.rglob("*") if p.suffix in RECORD_SUFFIXES)
