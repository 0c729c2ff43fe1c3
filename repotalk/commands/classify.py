"""Intent classification: create vs. update, and which field an update targets.

Keyword checks are plain case-insensitive substring tests, evaluated in
order; the first rule that matches wins. "Create a dataset repo" is an
update because it contains "set".
"""

from repotalk.commands.parse import UnknownUpdateType

CREATE = "create"
UPDATE = "update"

_UPDATE_WORDS = ("update", "change", "set")

# (field, keywords) in priority order
_UPDATE_FIELDS = [
    ("description", ("description",)),
    ("tags", ("tags", "topics")),
    ("website", ("website", "homepage", "url")),
]


def is_update(text):
    lower = text.lower()
    return any(word in lower for word in _UPDATE_WORDS)


def update_field(text):
    """Return 'description', 'tags' or 'website' for an update command.

    Raises UnknownUpdateType when no field keyword is present.
    """
    lower = text.lower()
    for name, keywords in _UPDATE_FIELDS:
        if any(word in lower for word in keywords):
            return name
    raise UnknownUpdateType()


def classify(text):
    """Classify text. Returns (CREATE, None) or (UPDATE, field)."""
    if is_update(text):
        return UPDATE, update_field(text)
    return CREATE, None
