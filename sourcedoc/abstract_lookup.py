"""Lookup of supplementary overview text in user-provided files."""

import glob
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class AbstractLookup:
    """Finds per-type abstract files among the configured glob patterns."""

    def __init__(self, patterns: tuple[str, ...] | list[str]) -> None:
        """Expand the glob patterns once, keeping regular files in a stable order."""
        files: list[Path] = []
        for pattern in patterns:
            for match in sorted(glob.glob(pattern, recursive=True)):  # noqa: PTH207
                p = Path(match)
                if p.is_file() and p not in files:
                    files.append(p)
        self.files = files

    def find(self, *names: str | None) -> Path | None:
        """Return the first file whose stem matches one of ``names``.

        Allows ``Structs.md`` or ``Structures.md`` for the same category.
        """
        wanted = {n for n in names if n}
        for f in self.files:
            if f.name.split(".")[0] in wanted:
                return f
        return None

    def read(self, *names: str | None) -> str | None:
        """Return the matching file's text, or None if there is none."""
        f = self.find(*names)
        if f is None:
            return None
        logger.debug("Using abstract file %s for %s", f, names)
        return f.read_text(encoding="utf-8")
