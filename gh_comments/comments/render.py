from datetime import datetime, timezone
from email.utils import format_datetime
from html import escape

from gh_comments.github.schemas import GithubComment


def format_utc_timestamp(value: datetime) -> str:
    """Format as RFC 1123 in UTC, e.g. `Mon, 01 Jan 2024 00:00:00 GMT`."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def issue_page_url(repo_owner: str, repo_name: str, issue_id: int) -> str:
    return f"https://github.com/{repo_owner}/{repo_name}/issues/{issue_id}"


def render_post_button(issue_url: str) -> str:
    return (
        f"<a href='{escape(issue_url)}#new_comment_field' rel='nofollow' "
        "class='button-gh'>Post a comment on Github</a>"
    )


def render_comment(comment: GithubComment) -> str:
    # body_html is rendered by GitHub and inserted as is
    user = comment.user
    return (
        "<div class='gh-comment'>"
        f"<img src='{escape(user.avatar_url)}' width='24px'>"
        f"<b><a href='{escape(user.html_url)}'>{escape(user.login)}</a></b>"
        " posted on "
        f"<em>{escape(format_utc_timestamp(comment.created_at))}</em>"
        "<div class='gh-comment-hr'></div>"
        f"{comment.body_html}"
        "</div>"
    )


def render_unavailable_message(status_code: int) -> str:
    return f"Comments are not open for this post yet. {status_code}"
