"""Configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

import typer

from .exceptions import ConfigError
from .models import DEFAULT_THEME, Style, Theme

ENV_PREFIX = "SMART_PS1_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

VALID_COLORS = frozenset(
    value
    for attr, value in vars(typer.colors).items()
    if attr.isupper() and isinstance(value, str) and value != typer.colors.RESET
)

# Theme role -> environment variable suffix.
_ROLE_VARS = {
    "name": "NAME_COLOR",
    "directory": "DIR_COLOR",
    "branch": "BRANCH_COLOR",
    "clean": "CLEAN_COLOR",
    "dirty": "DIRTY_COLOR",
}


@dataclass(frozen=True)
class Settings:
    """Application configuration."""

    placeholder_user: str = "unknown_user"
    strict: bool = False
    discover: bool = True
    theme: Theme = DEFAULT_THEME


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        placeholder_user=env.get(f"{ENV_PREFIX}PLACEHOLDER_USER") or Settings.placeholder_user,
        strict=_get_flag(env, f"{ENV_PREFIX}STRICT", default=False),
        theme=load_theme(env),
    )


def load_theme(environ: Mapping[str, str] | None = None) -> Theme:
    env = os.environ if environ is None else environ
    if env.get("NO_COLOR"):
        return Theme.plain()
    bold = _get_flag(env, f"{ENV_PREFIX}BOLD", default=True)
    styles = {}
    for role, suffix in _ROLE_VARS.items():
        default: Style = getattr(DEFAULT_THEME, role)
        color = _get_color(env, f"{ENV_PREFIX}{suffix}", default.color)
        styles[role] = Style(color=color, bold=bold)
    return Theme(**styles)


def _get_color(env: Mapping[str, str], var: str, default: str | None) -> str | None:
    raw = env.get(var)
    if raw is None or not raw.strip():
        return default
    color = raw.strip().lower()
    if color not in VALID_COLORS:
        choices = ", ".join(sorted(VALID_COLORS))
        raise ConfigError(f"Invalid colour {raw!r} in {var}. Choose one of: {choices}")
    return color


def _get_flag(env: Mapping[str, str], var: str, *, default: bool) -> bool:
    raw = env.get(var)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean {raw!r} in {var}. Use 1/0, true/false, yes/no or on/off.")


__all__ = ["Settings", "load_settings", "load_theme", "VALID_COLORS", "ENV_PREFIX"]
