# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest

from jules_client.client import JulesClient
from jules_client.core.errors import ApiError
from jules_client.data._api import _ApiClient

from fixtures.scripted_http import DummyHTTP
from fixtures.test_data import SAMPLE_SOURCE

BASE = "https://jules.googleapis.com/v1alpha/"


class TestSourceOperations(unittest.TestCase):
    def _client(self, responses):
        client = JulesClient("test-key")
        client._api = _ApiClient("test-key", BASE)
        client._api._http = DummyHTTP(responses)
        return client

    def test_get_source(self):
        client = self._client([(200, SAMPLE_SOURCE)])

        source = client.sources.get("sources/github/octo/app")

        self.assertEqual(client._api._http.calls[0]["url"], BASE + "sources/github/octo/app")
        self.assertEqual(source.github_repo.repo, "app")

    def test_list_with_filter(self):
        client = self._client([(200, {"sources": [SAMPLE_SOURCE]})])

        page = client.sources.list(filter="name=sources/github/octo/app", page_size=1)

        call = client._api._http.calls[0]
        self.assertEqual(call["url"], BASE + "sources")
        self.assertEqual(call["params"], {"filter": "name=sources/github/octo/app", "pageSize": 1})
        self.assertEqual(len(page), 1)
        self.assertFalse(page.has_more)

    def test_iter_keeps_filter_on_every_page(self):
        second = dict(SAMPLE_SOURCE, name="sources/github/octo/lib", id="github/octo/lib")
        client = self._client(
            [
                (200, {"sources": [SAMPLE_SOURCE], "nextPageToken": "t1"}),
                (200, {"sources": [second]}),
            ]
        )

        names = [s.name for s in client.sources.iter(filter="owner=octo")]

        self.assertEqual(names, ["sources/github/octo/app", "sources/github/octo/lib"])
        params = [c["params"] for c in client._api._http.calls]
        self.assertEqual(
            params,
            [
                {"filter": "owner=octo", "pageSize": 100},
                {"filter": "owner=octo", "pageSize": 100, "pageToken": "t1"},
            ],
        )

    def test_iter_stops_after_error(self):
        client = self._client([(403, "forbidden")])
        it = client.sources.iter()

        with self.assertRaises(ApiError):
            next(it)
        self.assertEqual(list(it), [])
        self.assertEqual(len(client._api._http.calls), 1)
