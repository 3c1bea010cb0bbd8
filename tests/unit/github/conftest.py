from typing import AsyncGenerator

import pytest

from gh_comments.github.client import GitHubClient


@pytest.fixture
async def github_client() -> AsyncGenerator[GitHubClient, None]:
    async with GitHubClient(
        user_agent="test-agent",
        github_api_version="2022-11-28",
        api_base_url="https://api.github.com/",
    ) as client:
        yield client
