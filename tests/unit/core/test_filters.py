"""Unit tests for core/filters.py"""

from datetime import datetime, timezone

import pytest

from docstore.core.filters import (
    matches, matches_author_ids, matches_contains_contents,
    matches_created_from, matches_created_to, matches_title_prefixes,
)
from docstore.crud.models import Author, Document, SearchRequest


JAN = datetime(2024, 1, 1, tzinfo=timezone.utc)
FEB = datetime(2024, 2, 1, tzinfo=timezone.utc)
MAR = datetime(2024, 3, 1, tzinfo=timezone.utc)

DOC = Document(id="d", title="Python Guide", content="Content about Python programming",
               author=Author(id="author2", name="Bob"), created=FEB)
BARE = Document(id="bare", created=FEB)


@pytest.mark.parametrize("prefixes,expected", [
    (None, True),
    ({"Python"}, True),
    ({"Java", "Py"}, True),
    ({"Guide"}, False),
    ({"python"}, False),
    (set(), False),
])
def test_matches_title_prefixes(prefixes, expected):
    assert matches_title_prefixes(DOC, prefixes) is expected


@pytest.mark.parametrize("needles,expected", [
    (None, True),
    ({"Python"}, True),
    ({"Java", "programming"}, True),
    ({"Java"}, False),
    (set(), False),
])
def test_matches_contains_contents(needles, expected):
    assert matches_contains_contents(DOC, needles) is expected


@pytest.mark.parametrize("author_ids,expected", [
    (None, True),
    ({"author2"}, True),
    ({"author1", "author2"}, True),
    ({"author1"}, False),
])
def test_matches_author_ids(author_ids, expected):
    assert matches_author_ids(DOC, author_ids) is expected


def test_null_fields_fail_when_criterion_set():
    assert matches_title_prefixes(BARE, {"P"}) is False
    assert matches_contains_contents(BARE, {"P"}) is False
    assert matches_author_ids(BARE, {"author2"}) is False


def test_null_fields_pass_when_criterion_unset():
    assert matches_title_prefixes(BARE, None)
    assert matches_contains_contents(BARE, None)
    assert matches_author_ids(BARE, None)


@pytest.mark.parametrize("bound,expected", [(None, True), (JAN, True), (FEB, False), (MAR, False)])
def test_matches_created_from_exclusive(bound, expected):
    assert matches_created_from(DOC, bound) is expected


@pytest.mark.parametrize("bound,expected", [(None, True), (MAR, True), (FEB, False), (JAN, False)])
def test_matches_created_to_exclusive(bound, expected):
    assert matches_created_to(DOC, bound) is expected


def test_matches_ands_all_criteria():
    assert matches(DOC, SearchRequest())
    assert matches(DOC, SearchRequest(title_prefixes={"Python"}, author_ids={"author2"}, created_from=JAN))
    assert not matches(DOC, SearchRequest(title_prefixes={"Python"}, author_ids={"author1"}))
