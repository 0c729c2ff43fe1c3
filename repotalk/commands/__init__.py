from repotalk.commands.interpret import interpret, from_fields
from repotalk.commands.parse import (
    CreateRepo, UpdateDescription, UpdateTags, UpdateWebsite,
    ParseError, RepoNameNotFound, DescriptionNotFound, WebsiteNotFound,
    UnknownUpdateType, InvalidParams,
)

ALL_MODES = [
    CreateRepo.mode, UpdateDescription.mode, UpdateTags.mode, UpdateWebsite.mode,
]
