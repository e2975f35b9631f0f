"""Shared fixtures for webrank tests."""

from __future__ import annotations

from typing import Iterable

import pytest

from webrank.models import Page


def make_page(uri: str, links: Iterable[str] = (), words: Iterable[str] = ()) -> Page:
    return Page(uri=uri, links=tuple(links), words=tuple(words))


@pytest.fixture()
def cat_dog_corpus():
    """Two documents sharing 'cat'."""

    return [
        make_page("docA", words=["cat", "dog"]),
        make_page("docB", words=["cat", "cat", "fish"]),
    ]


@pytest.fixture()
def web_corpus():
    """A small web with a cycle, a dangling page and an external link."""

    return [
        make_page(
            "https://a.example/",
            links=["https://b.example/", "https://c.example/"],
            words=["graph", "search", "engine", "ranking"],
        ),
        make_page(
            "https://b.example/",
            links=["https://c.example/", "https://elsewhere.example/"],
            words=["pagerank", "graph", "links"],
        ),
        make_page(
            "https://c.example/",
            links=["https://a.example/"],
            words=["cosine", "similarity", "vector", "search"],
        ),
        make_page(
            "https://d.example/",
            links=["https://a.example/"],
            words=["tf", "idf", "weighting", "search", "search"],
        ),
        make_page(
            "https://sink.example/",
            words=["dangling", "page", "without", "links"],
        ),
    ]
