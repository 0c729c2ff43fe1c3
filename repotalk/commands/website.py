"""Website (homepage) extraction.

Handles:
    "set my-org/my-repo website to https://example.com"
    "... with homepage as 'https://docs.example.com'"
"""

import re

_WEBSITE_RE = re.compile(
    r"(?:website|homepage|url)\s+(?:to|as)\s+[\"']?([^\"'\s]+)[\"']?",
    re.IGNORECASE)


def extract_website(text):
    """Return the website token from text, or None if there isn't one."""
    m = _WEBSITE_RE.search(text)
    return m.group(1) if m else None
