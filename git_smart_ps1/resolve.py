"""Resolve who the user is and where the shell currently sits."""

from __future__ import annotations

import logging
import os
import pwd
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, TypeVar

from .exceptions import ResolutionError
from .models import ResolvedIdentity, ResolvedLocation

T = TypeVar("T")

LOGIN_NAME_VAR = "LOGNAME"
WORKING_DIR_VAR = "PWD"
HOME_VAR = "HOME"


def resolve_identity(environ: Mapping[str, str] | None = None) -> ResolvedIdentity:
    """Look the user up in the password database, then fall back to $LOGNAME."""

    env = os.environ if environ is None else environ
    try:
        name = pwd.getpwuid(os.geteuid()).pw_name
    except KeyError:
        logging.debug("No password database entry for uid %s", os.geteuid())
    else:
        if name:
            return ResolvedIdentity(name=name)
    name = env.get(LOGIN_NAME_VAR, "")
    if name:
        logging.debug("Using $%s for the user name", LOGIN_NAME_VAR)
        return ResolvedIdentity(name=name)
    raise ResolutionError("Failed to get current user")


def resolve_current_dir(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    try:
        return os.getcwd()
    except OSError as exc:
        # The directory may have been removed from under the shell.
        logging.debug("getcwd failed: %s", exc)
    current = env.get(WORKING_DIR_VAR, "")
    if current:
        return current
    raise ResolutionError("Failed to get current dir")


def resolve_home_dir(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    home = env.get(HOME_VAR, "")
    if home:
        return home
    try:
        home = str(Path.home())
    except (KeyError, RuntimeError) as exc:
        raise ResolutionError("Failed to get current user's home dir") from exc
    if not home:
        raise ResolutionError("Failed to get current user's home dir")
    return home


def collapse_home(directory: str, home: str) -> str:
    """Replace the first occurrence of ``home`` in ``directory`` with ``~``.

    The match is textual, not path aware: ``/home/al`` also collapses
    ``/home/alice`` to ``~ice``.
    """

    if not home:
        return directory
    return directory.replace(home, "~", 1)


def build_location(current_dir: str, home_dir: str | None) -> ResolvedLocation:
    return ResolvedLocation(
        current_dir=current_dir,
        home_dir=home_dir,
        display_dir=collapse_home(current_dir, home_dir or ""),
    )


@dataclass(frozen=True)
class FallbackPolicy:
    """Decide, per field, whether a failed resolver is replaced or fatal.

    ``report`` receives the failure message whenever a placeholder is used.
    """

    strict: bool = False
    report: Callable[[str], None] | None = None

    def resolve(self, resolver: Callable[[], T], placeholder: T, *, fatal: bool = True) -> T:
        try:
            return resolver()
        except ResolutionError as exc:
            if fatal and self.strict:
                raise
            logging.debug("Substituting %r after: %s", placeholder, exc)
            if self.report is not None:
                self.report(str(exc))
            return placeholder


def resolve_location(
    environ: Mapping[str, str] | None = None,
    policy: FallbackPolicy | None = None,
) -> ResolvedLocation:
    """Resolve the current and home directory.

    Without a policy the current directory is required while a missing home
    directory only disables ``~`` collapsing.
    """

    if policy is None:
        current = resolve_current_dir(environ)
        try:
            home: str | None = resolve_home_dir(environ)
        except ResolutionError as exc:
            logging.debug("%s", exc)
            home = None
        return build_location(current, home)
    current = policy.resolve(lambda: resolve_current_dir(environ), "")
    home = policy.resolve(lambda: resolve_home_dir(environ), None, fatal=False)
    return build_location(current, home)


__all__ = [
    "resolve_identity",
    "resolve_current_dir",
    "resolve_home_dir",
    "collapse_home",
    "build_location",
    "resolve_location",
    "FallbackPolicy",
]
