"""Tests for the prompt pipeline and its fallback policy."""

from __future__ import annotations

import unittest
from types import SimpleNamespace
from unittest import mock

from git_smart_ps1 import app, resolve
from git_smart_ps1.config import Settings
from git_smart_ps1.exceptions import ResolutionError
from git_smart_ps1.models import RepoStatus, Theme

ENVIRON = {"HOME": "/home/alice", "LOGNAME": "", "PWD": ""}


class PipelineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = Settings(theme=Theme.plain())
        patches = [
            mock.patch.object(resolve.pwd, "getpwuid", return_value=SimpleNamespace(pw_name="alice")),
            mock.patch.object(resolve.os, "getcwd", return_value="/home/alice/proj"),
            mock.patch.object(app, "inspect_repo_status", return_value=None),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)
        self.report = mock.Mock()

    def test_prompt_without_repository(self) -> None:
        prompt = app.build_prompt(self.settings, environ=ENVIRON, report=self.report)
        self.assertEqual(prompt, "alice @ ~/proj\n--> ")
        self.report.assert_not_called()

    def test_repository_status_is_looked_up_for_current_dir(self) -> None:
        status = RepoStatus(branch_name="main", is_remote=False, is_dirty=True)
        with mock.patch.object(app, "inspect_repo_status", return_value=status) as inspect:
            prompt = app.build_prompt(self.settings, environ=ENVIRON, report=self.report)
        inspect.assert_called_once_with("/home/alice/proj", discover=True)
        self.assertEqual(prompt, "alice @ ~/proj : main ✗\n--> ")

    def test_identity_placeholder_is_reported(self) -> None:
        with mock.patch.object(resolve.pwd, "getpwuid", side_effect=KeyError("uid")):
            parts = app.gather(self.settings, environ=ENVIRON, report=self.report)
        self.assertEqual(parts.identity.name, "unknown_user")
        self.report.assert_called_once_with("Failed to get current user")

    def test_strict_identity_failure_is_fatal(self) -> None:
        settings = Settings(strict=True, theme=Theme.plain())
        with mock.patch.object(resolve.pwd, "getpwuid", side_effect=KeyError("uid")):
            with self.assertRaises(ResolutionError):
                app.gather(settings, environ=ENVIRON, report=self.report)

    def test_current_dir_failure_renders_empty_directory(self) -> None:
        with mock.patch.object(resolve.os, "getcwd", side_effect=FileNotFoundError("gone")):
            prompt = app.build_prompt(self.settings, environ=ENVIRON, report=self.report)
        self.assertEqual(prompt, "alice @ \n--> ")
        self.report.assert_called_once_with("Failed to get current dir")

    def test_report_error_prefix(self) -> None:
        with mock.patch.object(app.typer, "echo") as echo:
            app.report_error("Failed to get current user")
        echo.assert_called_once_with("$PS1 ERROR: Failed to get current user")


if __name__ == "__main__":
    unittest.main()
