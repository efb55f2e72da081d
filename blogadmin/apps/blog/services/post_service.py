"""Post service."""

from typing import Any, Dict
from blogadmin.core import exceptions
from blogadmin.core.bases.base_repository import DuplicateEntryError
from blogadmin.core.bases.base_service import BaseService
from blogadmin.core.logger import logger
from blogadmin.core.response.schemas import ErrorDetail
from blogadmin.apps.blog.repositories.post_repository import PostRepository
from blogadmin.apps.blog.models.post import Post
from blogadmin.apps.blog.schemas.post import PostForm, PostFormErrors

REQUIRED_MESSAGES = {
    "title": "Title is required",
    "slug": "Slug is required",
    "markdown": "Markdown is required",
}

SLUG_TAKEN_MESSAGE = "Slug is already taken"


class PostService(BaseService[Post]):
    """Post service class."""

    repository: PostRepository

    def __init__(self, repository: PostRepository):
        super().__init__(repository)

    async def get_post(self, slug: str) -> Post:
        """Load a post by slug, raising NotFoundException when absent."""
        with self._repository_errors("get"):
            post = await self.repository.get_post(slug)
        if post is None:
            raise exceptions.NotFoundException(detail=f"Post not found: {slug}")
        logger.debug(f"Loaded post slug={slug}")
        return post

    @staticmethod
    def validate_form(form: PostForm) -> PostFormErrors:
        """Presence check: every field must be a non-empty string."""
        return PostFormErrors(
            **{
                field: None if getattr(form, field) else message
                for field, message in REQUIRED_MESSAGES.items()
            }
        )

    async def update_post(self, slug: str, form: PostForm) -> Post:
        """Validate the submitted form and replace the post stored under ``slug``."""
        errors = self.validate_form(form)
        if errors.has_errors:
            logger.info(f"Rejected update of post slug={slug}: {errors.as_dict()}")
            raise exceptions.ValidationException(
                detail="Post form is invalid",
                error_details=self._error_details(errors.as_dict()),
            )

        existing = await self.get_post(slug)
        update_data = form.model_dump()
        await self._validate_update(slug, update_data, existing)

        with self._repository_errors("update"):
            try:
                updated = await self.repository.update_post(form, current_slug=slug)
            except DuplicateEntryError as e:
                logger.info(f"Slug {form.slug} was claimed while updating post slug={slug}")
                raise self._slug_conflict(form.slug) from e
        if updated is None:
            raise exceptions.NotFoundException(detail=f"Post not found: {slug}")

        logger.info(f"Updated post slug={slug} -> {updated.slug}")
        return updated

    async def _validate_update(
        self,
        item_id: Any,
        update_data: Dict[str, Any],
        existing_item: Post
    ) -> None:
        """A renamed slug must not belong to another post."""
        new_slug = update_data["slug"]
        if new_slug == existing_item.slug:
            return

        with self._repository_errors("get"):
            other = await self.repository.get_post(new_slug)
        if other is not None:
            raise self._slug_conflict(new_slug)

    @staticmethod
    def _slug_conflict(new_slug: str) -> exceptions.ConflictException:
        return exceptions.ConflictException(
            detail=f"Slug already in use: {new_slug}",
            error_details=[
                ErrorDetail(field="slug", code="CONFLICT", message=SLUG_TAKEN_MESSAGE)
            ],
        )
