from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LinkType(str, Enum):
    UNKNOWN = "unknown"
    GITHUB_USER = "github_user"
    GITHUB_REPO = "github_repo"


class ShowcaseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RepositoryStats(ShowcaseModel):
    name: str
    owner_login: str
    owner_avatar_url: str | None = None
    description: str | None = None
    url: str
    star_count: int = Field(ge=0)
    fork_count: int = Field(ge=0)
    open_issue_count: int = Field(ge=0)
    open_pull_request_count: int = Field(ge=0)
    discussion_count: int = Field(ge=0)
    mentionable_user_count: int = Field(ge=0)


class Link(ShowcaseModel):
    url: str
    type: LinkType
    stats: RepositoryStats | None = None


class ShowcaseRecord(ShowcaseModel):
    author: str
    links: list[Link]

    def to_json(self) -> str:
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)


class Comment(BaseModel):
    author: str
    body_html: str


class DiscussionPage(BaseModel):
    comments: list[Comment]
    end_cursor: str | None = None
    has_next_page: bool = False
