from datetime import datetime, timezone

from gh_comments.github.schemas import GithubComment, GithubUser


def make_comment(
    login: str,
    body_html: str = "<p>hi</p>",
    created_at: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc),
) -> GithubComment:
    return GithubComment(
        user=GithubUser(
            login=login,
            avatar_url=f"https://avatars.example/{login}.png",
            html_url=f"https://github.com/{login}",
        ),
        created_at=created_at,
        body_html=body_html,
    )
