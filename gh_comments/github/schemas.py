from datetime import datetime
from pydantic import BaseModel


class GithubUser(BaseModel):
    login: str
    html_url: str
    avatar_url: str


class GithubComment(BaseModel):
    user: GithubUser
    created_at: datetime
    body_html: str


class GithubIssueSummary(BaseModel):
    comments: int


class CommentsPage(BaseModel):
    comments: list[GithubComment]
    link_header: str | None = None
