"""Post admin router."""

from urllib.parse import quote

from fastapi import Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from blogadmin.core import exceptions
from blogadmin.core.database import get_session
from blogadmin.core.bases.base_router import BaseRouter
from blogadmin.core.response.handlers import success_response, error_response
from blogadmin.apps.blog.services.post_service import PostService
from blogadmin.apps.blog.repositories.post_repository import PostRepository
from blogadmin.apps.blog.schemas.post import PostForm, PostFormErrors, PostRead
from blogadmin.apps.blog.views.post_edit import render_edit_form

ADMIN_PREFIX = "/posts/admin"
FORM_FIELDS = ("title", "slug", "markdown")


def get_post_repository():
    """Get post repository instance."""
    return PostRepository(get_session)


def get_post_service():
    """Get post service instance."""
    repository = get_post_repository()
    return PostService(repository)


def admin_url(slug: str) -> str:
    return f"{ADMIN_PREFIX}/{quote(slug, safe='')}"


async def read_post_form(request: Request) -> PostForm:
    """Pull the three text fields out of a form submission.

    Missing fields and file uploads both count as empty.
    """
    form_data = await request.form()
    values = {}
    for field in FORM_FIELDS:
        value = form_data.get(field)
        values[field] = value if isinstance(value, str) else ""
    return PostForm(**values)


def _form_errors(exc: exceptions.ServiceException) -> PostFormErrors:
    return PostFormErrors(**{detail.field: detail.message for detail in exc.error_details})


class PostAdminRouter(BaseRouter):
    """Post admin router class."""

    def __init__(self):
        super().__init__(
            service_dependency=get_post_service,
            prefix=ADMIN_PREFIX,
            tags=["Posts Admin"]
        )

    def _register_routes(self) -> None:
        self._register_edit_form()
        self._register_update()
        self._register_get_json()

    def _register_edit_form(self) -> None:
        """Register GET /{slug} route."""
        @self.router.get(
            "/{slug}",
            response_class=HTMLResponse,
            summary="Edit post form",
            responses={404: {"description": "Post not found"}}
        )
        async def edit_post_form(
            slug: str,
            request: Request,
            service: PostService = Depends(self.service_dependency)
        ):
            post = await service.get_post(slug)
            values = PostForm(title=post.title, slug=post.slug, markdown=post.markdown)
            return HTMLResponse(render_edit_form(values, action=request.url.path))

    def _register_update(self) -> None:
        """Register PUT and POST /{slug} routes."""
        async def update_post(
            slug: str,
            request: Request,
            form: PostForm = Depends(read_post_form),
            service: PostService = Depends(self.service_dependency)
        ):
            try:
                post = await service.update_post(slug, form)
            except (exceptions.ValidationException, exceptions.ConflictException) as e:
                return HTMLResponse(
                    render_edit_form(form, action=request.url.path, errors=_form_errors(e)),
                    status_code=e.status_code
                )
            return RedirectResponse(
                url=admin_url(post.slug),
                status_code=status.HTTP_303_SEE_OTHER
            )

        self.router.add_api_route(
            "/{slug}",
            update_post,
            methods=["PUT", "POST"],
            summary="Update post",
            response_class=HTMLResponse,
            responses={
                303: {"description": "Post updated, redirect to its admin page"},
                404: {"description": "Post not found"},
                409: {"description": "Slug already in use"},
                422: {"description": "Validation error, form re-rendered"}
            }
        )

    def _register_get_json(self) -> None:
        """Register GET /{slug}/json route."""
        @self.router.get(
            "/{slug}/json",
            summary="Get post by slug",
            responses={
                200: {"description": "Post retrieved successfully"},
                404: {"description": "Post not found"},
                500: {"description": "Internal server error"}
            }
        )
        async def get_post(
            slug: str,
            service: PostService = Depends(self.service_dependency)
        ):
            try:
                post = await service.get_post(slug)
                return success_response(
                    data=PostRead.model_validate(post).model_dump(),
                    message="Post retrieved successfully"
                )
            except exceptions.NotFoundException as e:
                return error_response(
                    error_code="NOT_FOUND",
                    message=str(e.detail),
                    status_code=status.HTTP_404_NOT_FOUND
                )
            except exceptions.ServiceException as e:
                return error_response(
                    error_code="SERVICE_ERROR",
                    message=str(e.detail),
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
                )


# Router instance
router = PostAdminRouter().get_router()
