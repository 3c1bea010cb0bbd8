from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.responses import HTMLResponse

from gh_comments.comments.controller import CommentThreadController
from gh_comments.comments.dependencies import get_comment_thread_controller

router = APIRouter(
    prefix="/issues",
    tags=["Comments"],
)


@router.get(
    "/{issue_id}/comments",
    response_class=HTMLResponse,
    responses={
        200: {
            "description": "Rendered comment list followed by the load more control",
            "content": {"text/html": {}},
        }
    },
)
async def get_comments(
    request: Request,
    issue_id: int = Path(ge=1),
    page: int = Query(1, ge=1),
    controller: CommentThreadController = Depends(get_comment_thread_controller),
) -> HTMLResponse:
    result = await controller.load_comments(issue_id, page)

    next_href = None
    if result.next_page is not None:
        next_href = str(request.url.include_query_params(page=result.next_page))

    return HTMLResponse(
        controller.comment_list.render() + controller.load_more.render(next_href)
    )
