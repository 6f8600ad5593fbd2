"""Provisional documentation forest, before links are frozen into the tree."""

from dataclasses import dataclass, field


@dataclass
class DocLayout:
    """Roots and child lists of the documentation forest, as arena indices."""

    roots: list[int] = field(default_factory=list)
    children: dict[int, list[int]] = field(default_factory=dict)

    def reachable(self) -> list[int]:
        """Return every index in the forest, depth-first in child order."""
        out: list[int] = []
        stack = list(reversed(self.roots))
        while stack:
            i = stack.pop()
            out.append(i)
            stack.extend(reversed(self.children.get(i, [])))
        return out
