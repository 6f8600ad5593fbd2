"""Immutable run configuration threaded through every pass."""

from dataclasses import dataclass
from typing import Any

from sourcedoc.access_level import AccessLevel

HIDE_CHOICES = ("", "objc", "swift")


@dataclass(frozen=True)
class DocConfig:
    """Read-only options consulted while building the documentation tree."""

    modules: tuple[str, ...] = ()
    separate_global_declarations: bool = False
    hide_declarations: str = ""
    min_acl: AccessLevel = AccessLevel.PUBLIC
    abstract_glob: tuple[str, ...] = ()
    api_root: str = ""

    def __post_init__(self) -> None:
        """Reject unsupported hide_declarations values."""
        if self.hide_declarations not in HIDE_CHOICES:
            msg = (
                f"hide_declarations must be one of {HIDE_CHOICES}, "
                f"got {self.hide_declarations!r}"
            )
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "DocConfig":
        """Build a config from a merged configuration dictionary."""
        min_acl = config.get("min_acl") or "public"
        return cls(
            modules=tuple(str(m) for m in config.get("modules") or []),
            separate_global_declarations=bool(
                config.get("separate_global_declarations", False)
            ),
            hide_declarations=str(config.get("hide_declarations") or ""),
            min_acl=AccessLevel.from_human_string(str(min_acl)),
            abstract_glob=tuple(str(g) for g in config.get("abstract_glob") or []),
            api_root=str(config.get("api_root") or "").rstrip("/"),
        )

    @property
    def hide_objc(self) -> bool:
        return self.hide_declarations == "objc"

    @property
    def hide_swift(self) -> bool:
        return self.hide_declarations == "swift"

    @property
    def multiple_modules(self) -> bool:
        return len(self.modules) > 1

    def module_name(self, name: str) -> bool:
        """Whether ``name`` is one of the modules being documented."""
        return name in self.modules
