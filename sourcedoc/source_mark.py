"""Section marks used to group sibling declarations under a heading."""

import re
from dataclasses import dataclass

MARK_PREFIX = "MARK: "
_CLAUSE_RE = re.compile(r"^(.+?)\s*(==|:)\s*(.+)$")


@dataclass(frozen=True)
class SourceMark:
    """A parsed ``MARK: - Name -`` comment.

    Either dash may be absent. A bare ``MARK: -`` is a separator with no name.
    """

    name: str | None = None
    has_start_dash: bool = False
    has_end_dash: bool = False

    @classmethod
    def from_comment(cls, mark_string: str | None) -> "SourceMark":
        """Parse the text of a mark comment."""
        if not mark_string:
            return cls()
        content = mark_string.removeprefix(MARK_PREFIX)
        if not content:
            return cls()
        if content == "-":
            return cls(has_start_dash=True)

        start_dash = content.startswith("- ")
        end_dash = content.endswith(" -")
        start = 2 if start_dash else 0
        end = len(content) - 2 if end_dash else len(content)
        name = content[start:end].strip() or None
        return cls(name=name, has_start_dash=start_dash, has_end_dash=end_dash)

    @classmethod
    def from_generic_requirements(cls, requirements: str) -> "SourceMark":
        """Build the heading for members of a constrained extension."""
        clauses = []
        for raw in requirements.split(","):
            clause = raw.strip()
            if not clause:
                continue
            m = _CLAUSE_RE.match(clause)
            if m:
                lhs, op, rhs = m.groups()
                sep = ": " if op == ":" else " == "
                clauses.append(f"`{lhs}`{sep}`{rhs}`")
            else:
                clauses.append(f"`{clause}`")
        return cls(name=f"Available where {', '.join(clauses)}")

    @property
    def is_empty(self) -> bool:
        return self.name is None and not self.has_start_dash and not self.has_end_dash
