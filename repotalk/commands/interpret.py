"""Command interpreter: free text -> one parsed command.

interpret() is pure: the same text always gives the same command or the
same ParseError, and nothing here touches the network.
"""

from repotalk.commands.classify import is_update, update_field
from repotalk.commands.extract import (
    extract_repo_name, extract_update_payload, extract_for_create,
)
from repotalk.commands.parse import (
    CreateRepo, UpdateDescription, UpdateTags, UpdateWebsite, InvalidParams,
)
from repotalk.commands.tags import normalize_tags

# update field -> command constructor taking (name, payload)
_UPDATE_BUILDERS = {
    "description": lambda name, value: UpdateDescription(name=name, description=value),
    "tags": lambda name, value: UpdateTags(name=name, tags=tuple(value)),
    "website": lambda name, value: UpdateWebsite(name=name, website=value),
}


def _interpret_update(text):
    # Name first: "update" alone is a missing name, not an unknown field
    name = extract_repo_name(text)
    field = update_field(text)
    return _UPDATE_BUILDERS[field](name, extract_update_payload(text, field))


def _interpret_create(text):
    description, tags, website = extract_for_create(text)
    return CreateRepo(description=description, tags=tuple(tags), website=website)


# (predicate, interpreter) pairs, first match wins
_RULES = [
    (is_update, _interpret_update),
    (lambda text: True, _interpret_create),
]


def interpret(text):
    """Parse a natural-language repository command.

    Returns CreateRepo, UpdateDescription, UpdateTags or UpdateWebsite.
    Raises a ParseError subclass if a required piece is missing.
    """
    if not isinstance(text, str):
        raise InvalidParams()
    for matches, build in _RULES:
        if matches(text):
            return build(text)


def from_fields(description, tags, website=None):
    """Build a CreateRepo from discrete tool fields.

    tags is a space-separated string; it goes through the same normalizer
    as tags found in free text.
    """
    if not isinstance(description, str) or not isinstance(tags, str):
        raise InvalidParams("description and tags must be strings")
    if website is not None and not isinstance(website, str):
        raise InvalidParams("website must be a string")
    description = description.strip()
    if not description:
        raise InvalidParams("description must not be empty")
    return CreateRepo(
        description=description,
        tags=tuple(normalize_tags(tags.split())),
        website=website or None,
    )
