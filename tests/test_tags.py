"""Tests for tag normalization and website extraction."""

import pytest

from repotalk.commands.tags import normalize_tags, extract_tags, MAX_TAG_LENGTH
from repotalk.commands.website import extract_website


def test_cleans_tokens():
    assert normalize_tags(["Python", "Machine_Learning", "c#", "--edge--"]) == [
        "python", "machine-learning", "c", "edge"]


def test_keeps_order_and_duplicates():
    assert normalize_tags(["b", "a", "b"]) == ["b", "a", "b"]


@pytest.mark.parametrize("token", ["to", "TO", "'to'", "-to-"])
def test_drops_to(token):
    assert normalize_tags([token, "cats"]) == ["cats"]


def test_drops_empty_and_symbol_only():
    assert normalize_tags(["", "   ", "!!!", "__"]) == []


def test_truncates_long_tokens():
    tags = normalize_tags(["x" * 80])
    assert tags == ["x" * MAX_TAG_LENGTH]


def test_truncation_never_leaves_trailing_hyphen():
    token = "a" * 49 + "!b"
    assert normalize_tags([token]) == ["a" * 49]


@pytest.mark.parametrize("tokens", [
    ["Python", "Data Science", "c++", "to", "x" * 70],
    ["ml", "ml", "a-b-c"],
    ["_tmp", "--fast", "9lives"],
])
def test_idempotent(tokens):
    once = normalize_tags(tokens)
    assert normalize_tags(once) == once


def test_extract_tags_without_connector():
    assert extract_tags("new repo with tags python tensorflow") == ["python", "tensorflow"]


def test_extract_tags_doubled_connector():
    assert extract_tags("tags set to to cats") == ["cats"]


def test_extract_tags_commas_and_quotes():
    assert extract_tags('labeled as "cli, Dev-Tools"') == ["cli", "dev-tools"]


def test_extract_tags_absent():
    assert extract_tags("create a repository for stuff") == []


def test_website_token():
    assert extract_website("website to https://example.com please") == "https://example.com"
    assert extract_website("HOMEPAGE as 'https://a.dev/x'") == "https://a.dev/x"


def test_website_absent():
    assert extract_website("website https://example.com") is None
    assert extract_website("no link here") is None
