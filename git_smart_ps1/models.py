"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedIdentity:
    """Display name of the invoking user."""

    name: str


@dataclass(frozen=True)
class ResolvedLocation:
    """Current and home directory, plus the path shown in the prompt."""

    current_dir: str
    home_dir: str | None
    display_dir: str


@dataclass(frozen=True)
class StatusEntry:
    """A single pending change in the working tree."""

    code: str
    path: str


@dataclass(frozen=True)
class RepoStatus:
    """Branch and cleanliness of the repository owning a directory."""

    branch_name: str
    is_remote: bool
    is_dirty: bool
    root: str = ""
    entries: tuple[StatusEntry, ...] = ()

    @property
    def label(self) -> str:
        if self.is_remote:
            return f"remote: {self.branch_name}"
        return self.branch_name


@dataclass(frozen=True)
class Style:
    """Colour token plus weight for one prompt segment."""

    color: str | None = None
    bold: bool = False

    @property
    def is_plain(self) -> bool:
        return self.color is None and not self.bold


@dataclass(frozen=True)
class Theme:
    """Style per semantic role of the prompt."""

    name: Style
    directory: Style
    branch: Style
    clean: Style
    dirty: Style

    @classmethod
    def plain(cls) -> "Theme":
        blank = Style()
        return cls(name=blank, directory=blank, branch=blank, clean=blank, dirty=blank)


DEFAULT_THEME = Theme(
    name=Style("bright_green", bold=True),
    directory=Style("bright_blue", bold=True),
    branch=Style("bright_red", bold=True),
    clean=Style("bright_green", bold=True),
    dirty=Style("bright_red", bold=True),
)
