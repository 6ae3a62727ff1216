# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest

from jules_client.models.source import GitHubBranch, GitHubRepo, Source

from fixtures.test_data import SAMPLE_SOURCE


class TestSource(unittest.TestCase):
    def test_from_api_response(self):
        src = Source.from_api_response(SAMPLE_SOURCE)

        self.assertEqual(src.name, "sources/github/octo/app")
        self.assertEqual(src.github_repo.owner, "octo")
        self.assertTrue(src.github_repo.is_private)
        self.assertEqual(src.github_repo.default_branch, GitHubBranch("main"))
        self.assertEqual([b.display_name for b in src.github_repo.branches], ["main", "develop"])

    def test_round_trip(self):
        src = Source(
            name="sources/github/octo/app",
            id="github/octo/app",
            github_repo=GitHubRepo(
                owner="octo",
                repo="app",
                is_private=False,
                default_branch=GitHubBranch("main"),
                branches=[GitHubBranch("main")],
            ),
        )
        self.assertEqual(Source.from_api_response(src.to_dict()), src)

    def test_omitted_proto_defaults(self):
        repo = GitHubRepo.from_api_response({"owner": "o", "repo": "r", "defaultBranch": {"displayName": "main"}})
        self.assertFalse(repo.is_private)
        self.assertEqual(repo.branches, [])

    def test_source_without_repo(self):
        src = Source.from_api_response({"name": "sources/x", "id": "x"})
        self.assertIsNone(src.github_repo)
        self.assertEqual(src.to_dict(), {"name": "sources/x", "id": "x"})

    def test_missing_default_branch(self):
        with self.assertRaises(KeyError):
            GitHubRepo.from_api_response({"owner": "o", "repo": "r"})
