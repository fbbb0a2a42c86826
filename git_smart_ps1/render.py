"""Compose the styled prompt string."""

from __future__ import annotations

import typer

from .models import DEFAULT_THEME, RepoStatus, ResolvedIdentity, ResolvedLocation, Style, Theme

GIT_CLEAN = "\u2713"  # ✓
GIT_DIRTY = "\u2717"  # ✗
CONTINUATION_MARKER = "--> "


def style_segment(style: Style, text: str) -> str:
    """Wrap ``text`` in the escape sequences for ``style``, reset included."""

    if style.is_plain:
        return text
    return typer.style(text, fg=style.color, bold=True if style.bold else None)


def render_status(status: RepoStatus, theme: Theme = DEFAULT_THEME) -> str:
    branch = style_segment(theme.branch, status.label)
    if status.is_dirty:
        glyph = style_segment(theme.dirty, GIT_DIRTY)
    else:
        glyph = style_segment(theme.clean, GIT_CLEAN)
    return f" : {branch} {glyph}"


def render(
    identity: ResolvedIdentity,
    location: ResolvedLocation,
    status: RepoStatus | None,
    theme: Theme = DEFAULT_THEME,
) -> str:
    name = style_segment(theme.name, identity.name)
    directory = style_segment(theme.directory, location.display_dir)
    suffix = render_status(status, theme) if status is not None else ""
    return f"{name} @ {directory}{suffix}\n{CONTINUATION_MARKER}"


__all__ = ["GIT_CLEAN", "GIT_DIRTY", "CONTINUATION_MARKER", "style_segment", "render_status", "render"]
