import asyncio
import logging
from enum import Enum
from functools import partial
from pydantic import BaseModel, Field

from gh_comments.common.exceptions import GitHubRequestException
from gh_comments.comments.page import CommentList, LoadMoreControl
from gh_comments.comments.render import (
    issue_page_url,
    render_comment,
    render_post_button,
    render_unavailable_message,
)
from gh_comments.github.client import GitHubClient
from gh_comments.link_header.parser import build_link_set, parse_link_header_entries

logger = logging.getLogger(__name__)


class ThreadState(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    RENDERED_WITH_MORE = "rendered_with_more"
    RENDERED_TERMINAL = "rendered_terminal"
    FAILED = "failed"
    SUPERSEDED = "superseded"


class ThreadLoadResult(BaseModel):
    state: ThreadState
    issue_id: int
    page_number: int
    rendered_comments: int = 0
    next_page: int | None = None
    status_code: int | None = None
    link_errors: list[str] = Field(default_factory=list)


class CommentThreadController:
    """Drives one embedded comment thread.

    Each controller owns its own pagination cursor: the next page number lives
    in the handler bound to its load-more control, so several threads on the
    same page never share state. Calling `load_comments` while a previous
    call on the same controller is still waiting for GitHub cancels the
    previous call, which then renders nothing.
    """

    def __init__(
        self,
        *,
        github_client: GitHubClient,
        comment_list: CommentList,
        load_more: LoadMoreControl,
        repo_owner: str,
        repo_name: str,
    ):
        self.client = github_client
        self.comment_list = comment_list
        self.load_more = load_more
        self.repo_owner = repo_owner
        self.repo_name = repo_name

        self.total_comments: int | None = None
        self.summary_task: asyncio.Task[None] | None = None
        self._background_tasks: set[asyncio.Task[None]] = set()
        self._pending: asyncio.Task[ThreadLoadResult] | None = None
        self._state = ThreadState.IDLE

    @property
    def state(self) -> ThreadState:
        return self._state

    async def load_comments(
        self, issue_id: int, page_number: int = 1
    ) -> ThreadLoadResult:
        if self._pending and not self._pending.done():
            logger.info(
                f"Cancelling pending comments request for issue {issue_id}"
            )
            self._pending.cancel()

        self.summary_task = asyncio.create_task(self._load_summary(issue_id))
        self._background_tasks.add(self.summary_task)
        self.summary_task.add_done_callback(self._background_tasks.discard)

        task = asyncio.create_task(self._load_page(issue_id, page_number))
        self._pending = task
        self._state = ThreadState.REQUESTING

        try:
            result = await task
        except asyncio.CancelledError:
            if self._pending is task:
                raise
            return ThreadLoadResult(
                state=ThreadState.SUPERSEDED,
                issue_id=issue_id,
                page_number=page_number,
            )

        self._state = result.state
        return result

    async def _load_summary(self, issue_id: int) -> None:
        try:
            summary = await self.client.fetch_issue(
                self.repo_owner, self.repo_name, issue_id
            )
        except (GitHubRequestException, ValueError) as e:
            logger.warning(f"Failed to fetch summary for issue {issue_id}: {e}")
            return
        self.total_comments = summary.comments

    def _render_failure(
        self, issue_id: int, page_number: int, status_code: int, error: Exception
    ) -> ThreadLoadResult:
        logger.warning(f"Comments unavailable for issue {issue_id}: {error}")
        self.comment_list.append(render_unavailable_message(status_code))
        return ThreadLoadResult(
            state=ThreadState.FAILED,
            issue_id=issue_id,
            page_number=page_number,
            status_code=status_code,
        )

    async def _load_page(self, issue_id: int, page_number: int) -> ThreadLoadResult:
        logger.info(f"Loading comments page {page_number} for issue {issue_id}")
        try:
            page = await self.client.fetch_comments(
                self.repo_owner, self.repo_name, issue_id, page_number
            )
        except GitHubRequestException as e:
            return self._render_failure(issue_id, page_number, e.status_code, e)
        except ValueError as e:
            # Response was successful but its payload could not be read
            return self._render_failure(issue_id, page_number, 200, e)

        if page_number == 1:
            self.comment_list.append(
                render_post_button(
                    issue_page_url(self.repo_owner, self.repo_name, issue_id)
                )
            )

        for comment in page.comments:
            self.comment_list.append(render_comment(comment))

        link_results = parse_link_header_entries(page.link_header)
        links = build_link_set(link_results)
        link_errors = [str(r.error) for r in link_results if r.error is not None]

        if "next" in links:
            next_page = page_number + 1
            self.load_more.bind(partial(self.load_comments, issue_id, next_page))
            self.load_more.show()
            state = ThreadState.RENDERED_WITH_MORE
        else:
            next_page = None
            self.load_more.hide()
            state = ThreadState.RENDERED_TERMINAL

        return ThreadLoadResult(
            state=state,
            issue_id=issue_id,
            page_number=page_number,
            rendered_comments=len(page.comments),
            next_page=next_page,
            link_errors=link_errors,
        )
