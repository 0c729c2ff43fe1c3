"""Tests for intent classification and the interpreter's command types."""

import dataclasses

import pytest

from repotalk.commands import (
    interpret, from_fields, CreateRepo, UpdateTags, InvalidParams, UnknownUpdateType,
)
from repotalk.commands.classify import classify, CREATE, UPDATE
from repotalk.commands.tags import normalize_tags


@pytest.mark.parametrize("text, expected", [
    ("Create a repository for notes", (CREATE, None)),
    ("update x description to y", (UPDATE, "description")),
    ("CHANGE x TOPICS to y", (UPDATE, "tags")),
    ("set x homepage to y", (UPDATE, "website")),
    # first rule wins when several field words appear
    ("update x website and tags and description", (UPDATE, "description")),
    ("update x url and topics", (UPDATE, "tags")),
    # substring match
    ("reset x curl to y", (UPDATE, "website")),
])
def test_classify(text, expected):
    assert classify(text) == expected


def test_classify_unknown_update():
    with pytest.raises(UnknownUpdateType):
        classify("update my-repo")


@pytest.mark.parametrize("text", [
    "Update a repository for stuff",
    "make something, then change it",
    "new repo for an asset pipeline",
])
def test_update_words_never_create(text):
    try:
        cmd = interpret(text)
    except ValueError:
        return
    assert not isinstance(cmd, CreateRepo)


def test_interpret_is_deterministic():
    text = "Create a repository for my project, tagged as a b"
    assert interpret(text) == interpret(text)


def test_commands_are_immutable():
    cmd = interpret("Update my-repo tags to a b")
    assert isinstance(cmd, UpdateTags)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cmd.tags = ("c",)


def test_create_tags_are_normalized_already():
    cmd = interpret("Create a repository for things, tags as Foo BAR_baz")
    assert cmd.tags == ("foo", "bar-baz")
    assert tuple(normalize_tags(cmd.tags)) == cmd.tags


@pytest.mark.parametrize("value", [None, 42, ["update"]])
def test_interpret_rejects_non_text(value):
    with pytest.raises(InvalidParams):
        interpret(value)


def test_from_fields():
    cmd = from_fields("My Tool", "python  CLI to", "https://t.dev")
    assert cmd == CreateRepo(description="My Tool", tags=("python", "cli"), website="https://t.dev")


def test_from_fields_optional_website():
    cmd = from_fields("My Tool", "")
    assert cmd.website is None
    assert cmd.tags == ()


@pytest.mark.parametrize("description, tags, website", [
    (None, "a", None),
    ("x", None, None),
    ("x", "a", 5),
    ("   ", "a", None),
])
def test_from_fields_invalid(description, tags, website):
    with pytest.raises(InvalidParams):
        from_fields(description, tags, website)
