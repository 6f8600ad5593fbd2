"""Orchestration logic for turning declaration records into a documentation tree."""

import logging
from pathlib import Path

from sourcedoc.abstract_lookup import AbstractLookup
from sourcedoc.build_records import build_records, find_record_files
from sourcedoc.doc_config import DocConfig
from sourcedoc.documentation_result import DocumentationResult
from sourcedoc.load_config import load_config
from sourcedoc.page_assigner import PageAssigner
from sourcedoc.tree_builder import TreeBuilder

logger = logging.getLogger(__name__)


def build_documentation(
    input_dir: Path,
    config_path: str | None = None,
) -> DocumentationResult:
    """Execute the full pipeline: load, assemble, filter and name."""
    files = find_record_files(input_dir)
    if not files:
        msg = f"No declaration files found under: {input_dir}"
        raise SystemExit(msg)

    config = DocConfig.from_dict(load_config(config_path))
    return build_from_records(build_records(files), config)


def build_from_records(records: list[dict], config: DocConfig) -> DocumentationResult:
    """Run assembly and naming over already-loaded records."""
    tree = TreeBuilder(config).build(records)
    pages = PageAssigner(config).assign(tree)
    logger.info(
        "Documentation for %s: %d roots",
        ", ".join(config.modules) or "unnamed module",
        len(tree.roots),
    )
    return DocumentationResult(
        config=config,
        tree=tree,
        pages=pages,
        abstracts=AbstractLookup(config.abstract_glob),
    )
