import logging
from types import TracebackType
from typing import Any, Type
from aiohttp import ClientError, ClientSession

from gh_comments.common.exceptions import GitHubRequestException
from gh_comments.github.schemas import (
    CommentsPage,
    GithubComment,
    GithubIssueSummary,
)

logger = logging.getLogger(__name__)

HTML_MEDIA_TYPE = "application/vnd.github.v3.html+json"


class GitHubClient:
    def __init__(
        self,
        *,
        user_agent: str,
        github_api_version: str,
        github_token: str | None = None,
        api_base_url: str = "https://api.github.com",
    ):
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": github_api_version,
            "User-Agent": user_agent,
        }
        if github_token:
            headers["Authorization"] = f"Bearer {github_token}"

        self.api_base_url = api_base_url.rstrip("/")
        self.session: ClientSession = ClientSession(headers=headers)

    async def __aenter__(self):
        return self

    async def __aexit__(
        self, exc_type: Type[Exception], exc: Exception, tb: TracebackType
    ):
        await self.close()

    async def close(self) -> None:
        if self.session:
            await self.session.close()

    async def request(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[Any, dict[str, str]]:
        try:
            async with self.session.request(
                method, url, params=params, headers=headers
            ) as response:
                if response.status >= 400:
                    raise GitHubRequestException(url, response.status)
                data = await response.json()
                return data, dict(response.headers)
        except ClientError as e:
            logger.warning(f"HTTP request to {url} failed: {e}")
            raise GitHubRequestException(
                url, 0, f"Request to {url} failed: {e}"
            ) from e

    def issue_url(self, repo_owner: str, repo_name: str, issue_id: int) -> str:
        return f"{self.api_base_url}/repos/{repo_owner}/{repo_name}/issues/{issue_id}"

    async def fetch_issue(
        self, repo_owner: str, repo_name: str, issue_id: int
    ) -> GithubIssueSummary:
        data, _ = await self.request(
            "GET", self.issue_url(repo_owner, repo_name, issue_id)
        )
        return GithubIssueSummary.model_validate(data)

    async def fetch_comments(
        self, repo_owner: str, repo_name: str, issue_id: int, page: int = 1
    ) -> CommentsPage:
        data, headers = await self.request(
            "GET",
            f"{self.issue_url(repo_owner, repo_name, issue_id)}/comments",
            params={"page": str(page)},
            headers={"Accept": HTML_MEDIA_TYPE},
        )
        return CommentsPage(
            comments=[GithubComment.model_validate(comment) for comment in data],
            link_header=headers.get("Link") or headers.get("link"),
        )
