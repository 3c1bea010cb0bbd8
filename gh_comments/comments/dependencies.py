from fastapi import Depends

from gh_comments.comments.controller import CommentThreadController
from gh_comments.comments.page import CommentList, LoadMoreControl
from gh_comments.config import Settings, get_settings
from gh_comments.github.client import GitHubClient
from gh_comments.github.dependencies import get_github_client


def get_comment_thread_controller(
    github_client: GitHubClient = Depends(get_github_client),
    settings: Settings = Depends(get_settings),
) -> CommentThreadController:
    return CommentThreadController(
        github_client=github_client,
        comment_list=CommentList(),
        load_more=LoadMoreControl(),
        repo_owner=settings.GITHUB_REPO_OWNER,
        repo_name=settings.GITHUB_REPO_NAME,
    )
