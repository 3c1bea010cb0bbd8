from datetime import datetime, timedelta, timezone

from gh_comments.comments.render import (
    format_utc_timestamp,
    issue_page_url,
    render_comment,
    render_post_button,
    render_unavailable_message,
)
from gh_comments.github.schemas import GithubComment


def test_format_utc_timestamp() -> None:
    assert (
        format_utc_timestamp(datetime(2024, 1, 1, tzinfo=timezone.utc))
        == "Mon, 01 Jan 2024 00:00:00 GMT"
    )
    # Offsets are converted to UTC
    plus_two = timezone(timedelta(hours=2))
    assert (
        format_utc_timestamp(datetime(2024, 3, 15, 14, 5, 9, tzinfo=plus_two))
        == "Fri, 15 Mar 2024 12:05:09 GMT"
    )
    # Naive values are taken as UTC
    assert format_utc_timestamp(datetime(2024, 1, 1)) == "Mon, 01 Jan 2024 00:00:00 GMT"


def test_render_post_button() -> None:
    url = issue_page_url("kidscancode", "godot_recipes", 42)
    assert url == "https://github.com/kidscancode/godot_recipes/issues/42"

    assert render_post_button(url) == (
        "<a href='https://github.com/kidscancode/godot_recipes/issues/42"
        "#new_comment_field' rel='nofollow' class='button-gh'>"
        "Post a comment on Github</a>"
    )


def test_render_comment(alice_comment: GithubComment) -> None:
    assert render_comment(alice_comment) == (
        "<div class='gh-comment'>"
        "<img src='a.png' width='24px'>"
        "<b><a href='u/a'>alice</a></b>"
        " posted on "
        "<em>Mon, 01 Jan 2024 00:00:00 GMT</em>"
        "<div class='gh-comment-hr'></div>"
        "<p>hi</p>"
        "</div>"
    )


def test_render_comment_escapes_author_fields_not_body(
    alice_comment: GithubComment,
) -> None:
    alice_comment.user.login = "<script>"
    alice_comment.user.html_url = "u/a' onclick='x"
    alice_comment.body_html = "<pre><code>&lt;b&gt;</code></pre>"

    fragment = render_comment(alice_comment)

    assert "&lt;script&gt;" in fragment
    assert "<script>" not in fragment
    assert "href='u/a&#x27; onclick=&#x27;x'" in fragment
    assert fragment.endswith("<pre><code>&lt;b&gt;</code></pre></div>")


def test_render_unavailable_message() -> None:
    assert (
        render_unavailable_message(404)
        == "Comments are not open for this post yet. 404"
    )
