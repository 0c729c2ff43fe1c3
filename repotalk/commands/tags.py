"""Tag (topic) extraction and normalization.

Handles:
    "... with tags python tensorflow"
    "... tagged as ml, data-science"
    "update my-repo topics to cli tools"

A normalized tag is lowercase [a-z0-9-], starts with a letter or digit,
is at most 50 characters, and is never the bare word "to".
"""

import re

MAX_TAG_LENGTH = 50

_TAG_SEGMENT_RE = re.compile(
    r"(?:tags|topics|labeled|tagged)\s+"
    r"(?:(?:set|changed|updated)\s+)?"
    r"(?:(?:to|as)\s+)?"
    r"[\"']?([^\"']+)[\"']?",
    re.IGNORECASE)
_SPLIT_RE = re.compile(r"[\s,]+")
_INVALID_CHARS_RE = re.compile(r"[^a-z0-9-]")
_VALID_START_RE = re.compile(r"^[a-z0-9]")


def _clean(token):
    tag = _INVALID_CHARS_RE.sub("-", token.lower().strip())
    return tag.strip("-")[:MAX_TAG_LENGTH].rstrip("-")


def normalize_tags(tokens):
    """Clean a sequence of raw tokens into tags, keeping source order.

    Duplicates are kept. Tokens that clean down to nothing, to "to", or to
    something not starting with a letter or digit are dropped.
    """
    tags = []
    for token in tokens:
        tag = _clean(token)
        if tag == "to":
            continue
        if not tag or len(tag) > MAX_TAG_LENGTH:
            continue
        if not _VALID_START_RE.match(tag):
            continue
        tags.append(tag)
    return tags


def extract_tags(text):
    """Find the tag segment in text and normalize it. Returns [] if absent."""
    m = _TAG_SEGMENT_RE.search(text)
    if m is None:
        return []
    return normalize_tags(_SPLIT_RE.split(m.group(1)))
