"""Entity extraction: repository name and payload for each kind of command.

Handles:
    "update my-repo description to 'New description'"
    "change repository my-org/tools topics to cli python"
    "set my-org/my-repo website to https://example.com"
    "create a repository for my weekend project, tagged as fun"
"""

import re

from repotalk.commands.parse import (
    RepoNameNotFound, DescriptionNotFound, WebsiteNotFound,
)
from repotalk.commands.tags import extract_tags
from repotalk.commands.website import extract_website

# Words of the command grammar itself; never taken as a repository name
_GRAMMAR_WORDS = r"(?:the|repository|description|tags|topics|website|homepage|url)(?![\w/-])"

_REPO_NAME_RE = re.compile(
    r"(?:update|change|set|modify)\s+(?:the\s+)?(?:repository\s+)?"
    rf"(?!{_GRAMMAR_WORDS})([a-zA-Z0-9_/-]+)",
    re.IGNORECASE)

_UPDATE_DESCRIPTION_RE = re.compile(
    r"description\s+(?:to|as)\s+[\"']?([^\"']+)[\"']?",
    re.IGNORECASE)

# Description runs up to the first comma or period, so an unpunctuated
# "with tags ..." clause stays part of it.
_CREATE_DESCRIPTION_RE = re.compile(
    r"(?:create|make|new)\s+(?:a\s+)?(?:repository\s+)?(?:for|called|named)?\s+([^,.]+)",
    re.IGNORECASE)


def extract_repo_name(text):
    m = _REPO_NAME_RE.search(text)
    if m is None:
        raise RepoNameNotFound()
    return m.group(1)


def extract_update_description(text):
    m = _UPDATE_DESCRIPTION_RE.search(text)
    if m is None:
        raise DescriptionNotFound("New description not found in update command")
    return m.group(1).strip()


def extract_create_description(text):
    m = _CREATE_DESCRIPTION_RE.search(text)
    description = m.group(1).strip() if m else ""
    if not description:
        raise DescriptionNotFound()
    return description


def extract_update_website(text):
    website = extract_website(text)
    if website is None:
        raise WebsiteNotFound()
    return website


# field -> payload extractor, for the update path
_UPDATE_PAYLOADS = {
    "description": extract_update_description,
    "tags": extract_tags,
    "website": extract_update_website,
}


def extract_update_payload(text, field):
    """Extract the new value for an update of the given field.

    The repository name is extracted separately (extract_repo_name), ahead
    of field classification.
    """
    return _UPDATE_PAYLOADS[field](text)


def extract_for_create(text):
    """Extract (description, tags, website) for a create command.

    Tags and website are optional; description is required.
    """
    return extract_create_description(text), extract_tags(text), extract_website(text)
