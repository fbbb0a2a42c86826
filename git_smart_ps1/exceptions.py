"""Custom error hierarchy for git-smart-ps1."""

from __future__ import annotations


class PromptError(RuntimeError):
    """Base error for the prompt generator."""


class ResolutionError(PromptError):
    """Raised when every source for an identity or location field is exhausted."""


class ConfigError(PromptError):
    """Raised when an environment setting holds an invalid value."""


class GitCommandError(PromptError):
    """Raised when an underlying git command fails."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        super().__init__(message)


__all__ = [
    "PromptError",
    "ResolutionError",
    "ConfigError",
    "GitCommandError",
]
