"""Parsed command types for the repository command system.

interpret(text) returns exactly one of the four command variants below,
or raises a ParseError subclass naming what it could not find.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateRepo:
    mode = "create"
    description: str
    tags: tuple = ()
    website: str = None


@dataclass(frozen=True)
class UpdateDescription:
    mode = "update-description"
    name: str
    description: str


@dataclass(frozen=True)
class UpdateTags:
    mode = "update-tags"
    name: str
    tags: tuple = ()


@dataclass(frozen=True)
class UpdateWebsite:
    mode = "update-website"
    name: str
    website: str


# --- Errors ---

class ParseError(ValueError):
    """Input text could not be turned into a command."""


class RepoNameNotFound(ParseError):
    def __init__(self, message="Repository name not found in update command"):
        super().__init__(message)


class DescriptionNotFound(ParseError):
    def __init__(self, message="Repository description not found in create command"):
        super().__init__(message)


class WebsiteNotFound(ParseError):
    def __init__(self, message="New website URL not found in update command"):
        super().__init__(message)


class UnknownUpdateType(ParseError):
    def __init__(self, message='Unknown update type. Use "description", "tags", or "website".'):
        super().__init__(message)


class InvalidParams(ParseError):
    def __init__(self, message="Invalid command format"):
        super().__init__(message)
