"""Tests for workspace resolution and repository argument expansion."""

from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest import mock

from git_cloner.config import DEFAULT_WORKSPACE, WORKSPACE_ENV, resolve_repo_argument, resolve_workspace
from git_cloner.exceptions import ParseError

HOME = "/home/tester"


class ResolveWorkspaceTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch.dict(os.environ, {"HOME": HOME})
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(WORKSPACE_ENV, None)

    def test_default(self) -> None:
        self.assertEqual(DEFAULT_WORKSPACE, "~/projects")
        self.assertEqual(resolve_workspace(None), Path(HOME, "projects"))

    def test_environment_variable(self) -> None:
        os.environ[WORKSPACE_ENV] = "~/code"

        self.assertEqual(resolve_workspace(None), Path(HOME, "code"))

    def test_flag_wins_over_environment(self) -> None:
        os.environ[WORKSPACE_ENV] = "~/code"

        self.assertEqual(resolve_workspace("/srv/ws"), Path("/srv/ws"))

    def test_empty_values_are_unset(self) -> None:
        os.environ[WORKSPACE_ENV] = ""

        self.assertEqual(resolve_workspace(""), Path(HOME, "projects"))


class ResolveRepoArgumentTests(unittest.TestCase):
    def setUp(self) -> None:
        self.workspace = Path(HOME, "projects")
        self.cwd = self.workspace / "github.com" / "acme-org"

    def test_full_url_is_returned_unchanged(self) -> None:
        url = resolve_repo_argument("https://gitlab.com/group/sub/repo.git", self.workspace, cwd=Path("/tmp"))

        self.assertEqual(url.raw, "https://gitlab.com/group/sub/repo.git")

    def test_bare_name_uses_inferred_org(self) -> None:
        url = resolve_repo_argument("stm.aux", self.workspace, cwd=self.cwd)

        self.assertEqual(url.raw, "https://github.com/acme-org/stm.aux")

    def test_org_and_repo_use_inferred_host(self) -> None:
        url = resolve_repo_argument("other-org/repo", self.workspace, cwd=self.cwd)

        self.assertEqual(url.raw, "https://github.com/other-org/repo")

    def test_works_from_inside_a_cloned_repo(self) -> None:
        url = resolve_repo_argument("sibling", self.workspace, cwd=self.cwd / "widget" / "src")

        self.assertEqual(url.raw, "https://github.com/acme-org/sibling")

    def test_parent_reference_does_not_escape_org(self) -> None:
        url = resolve_repo_argument("..", self.workspace, cwd=self.cwd)

        self.assertEqual(url.host, "github.com")
        self.assertEqual(url.segments, ("",))
        self.assertEqual(url.name, "")

    def test_defaults_to_real_cwd(self) -> None:
        with mock.patch("git_cloner.config.Path.cwd", return_value=self.cwd):
            url = resolve_repo_argument("stm.aux", self.workspace)

        self.assertEqual(url.raw, "https://github.com/acme-org/stm.aux")

    def test_bare_name_outside_workspace_fails(self) -> None:
        with self.assertRaises(ParseError):
            resolve_repo_argument("stm.aux", self.workspace, cwd=Path("/tmp/other"))

    def test_too_many_components_fail(self) -> None:
        with self.assertRaises(ParseError):
            resolve_repo_argument("a/b/c", self.workspace, cwd=self.cwd)


if __name__ == "__main__":
    unittest.main()
