"""Main application orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping

import typer

from .config import Settings
from .models import RepoStatus, ResolvedIdentity, ResolvedLocation
from .render import render
from .repo import inspect_repo_status
from .resolve import FallbackPolicy, resolve_identity, resolve_location

ERROR_PREFIX = "$PS1 ERROR: "


@dataclass(frozen=True)
class PromptParts:
    """Everything the renderer needs, resolved for one invocation."""

    identity: ResolvedIdentity
    location: ResolvedLocation
    status: RepoStatus | None


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def report_error(message: str) -> None:
    """Print the advisory diagnostic line shown above the prompt."""

    typer.echo(f"{ERROR_PREFIX}{message}")


def gather(
    settings: Settings,
    *,
    environ: Mapping[str, str] | None = None,
    report: Callable[[str], None] | None = report_error,
) -> PromptParts:
    """Run the identity, location and repository stages.

    Raises ``ResolutionError`` only when ``settings.strict`` is set and the
    user name or current directory cannot be resolved.
    """

    policy = FallbackPolicy(strict=settings.strict, report=report)
    identity = policy.resolve(
        lambda: resolve_identity(environ),
        ResolvedIdentity(name=settings.placeholder_user),
    )
    location = resolve_location(environ, policy)
    status = inspect_repo_status(location.current_dir, discover=settings.discover)
    return PromptParts(identity=identity, location=location, status=status)


def build_prompt(
    settings: Settings,
    *,
    environ: Mapping[str, str] | None = None,
    report: Callable[[str], None] | None = report_error,
) -> str:
    parts = gather(settings, environ=environ, report=report)
    return render(parts.identity, parts.location, parts.status, settings.theme)


__all__ = ["PromptParts", "configure_logging", "report_error", "gather", "build_prompt"]
