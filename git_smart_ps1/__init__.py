"""Two-line shell prompt showing the user, directory and git branch state."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("git-smart-ps1")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.1.0.dev0"
