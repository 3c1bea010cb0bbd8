from unittest.mock import Mock

import pytest
from pytest_mock import MockerFixture

from gh_comments.comments.controller import CommentThreadController
from gh_comments.comments.page import CommentList, LoadMoreControl
from gh_comments.github.client import GitHubClient
from gh_comments.github.schemas import (
    CommentsPage,
    GithubComment,
    GithubIssueSummary,
)


@pytest.fixture
def alice_comment() -> GithubComment:
    return GithubComment.model_validate(
        {
            "user": {"login": "alice", "avatar_url": "a.png", "html_url": "u/a"},
            "created_at": "2024-01-01T00:00:00Z",
            "body_html": "<p>hi</p>",
        }
    )


@pytest.fixture
def mock_github_client(mocker: MockerFixture) -> Mock:
    client = mocker.Mock(spec=GitHubClient)
    client.fetch_issue.return_value = GithubIssueSummary(comments=1)
    client.fetch_comments.return_value = CommentsPage(comments=[])
    return client


@pytest.fixture
def comment_list() -> CommentList:
    return CommentList()


@pytest.fixture
def load_more() -> LoadMoreControl:
    return LoadMoreControl()


@pytest.fixture
def controller(
    mock_github_client: Mock,
    comment_list: CommentList,
    load_more: LoadMoreControl,
) -> CommentThreadController:
    return CommentThreadController(
        github_client=mock_github_client,
        comment_list=comment_list,
        load_more=load_more,
        repo_owner="kidscancode",
        repo_name="godot_recipes",
    )
