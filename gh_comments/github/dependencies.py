from fastapi import Request

from gh_comments.config import Settings
from gh_comments.github.client import GitHubClient


def create_github_client(settings: Settings) -> GitHubClient:
    return GitHubClient(
        user_agent=settings.USER_AGENT,
        github_api_version=settings.GITHUB_API_VERSION,
        github_token=settings.GITHUB_TOKEN,
        api_base_url=settings.GITHUB_API_URL,
    )


def get_github_client(request: Request) -> GitHubClient:
    return request.app.state.github_client
