"""In-process stand-ins for the host page elements a comment thread writes to.

The documentation page owns a comment list container and a "load more"
control. These classes hold their state so the controller can be driven
without a browser and the result rendered back to markup.
"""

from html import escape
from typing import Any, Awaitable, Callable

from gh_comments.common.exceptions import LoadMoreInactiveException

LoadMoreHandler = Callable[[], Awaitable[Any]]


class CommentList:
    def __init__(self, element_id: str = "gh-comments-list"):
        self.element_id = element_id
        self.fragments: list[str] = []

    def append(self, fragment: str) -> None:
        self.fragments.append(fragment)

    def clear(self) -> None:
        self.fragments.clear()

    def render(self) -> str:
        return f"<div id='{escape(self.element_id)}'>{''.join(self.fragments)}</div>"


class LoadMoreControl:
    def __init__(self, element_id: str = "gh-load-comments"):
        self.element_id = element_id
        self.visible = False
        self.handler: LoadMoreHandler | None = None

    @property
    def actionable(self) -> bool:
        return self.visible and self.handler is not None

    def bind(self, handler: LoadMoreHandler) -> None:
        self.handler = handler

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False
        self.handler = None

    async def activate(self) -> Any:
        handler = self.handler
        if not self.visible or handler is None:
            raise LoadMoreInactiveException(self.element_id)
        return await handler()

    def render(self, href: str | None = None) -> str:
        style = "" if self.visible else " style='display: none'"
        href_attr = f" href='{escape(href)}'" if href and self.visible else ""
        return (
            f"<a id='{escape(self.element_id)}' class='button-gh'"
            f"{href_attr}{style}>Load more comments</a>"
        )
