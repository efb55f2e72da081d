"""Unit tests for PostService with a mocked repository."""

import pytest
from unittest.mock import AsyncMock

from blogadmin.core import exceptions
from blogadmin.core.bases.base_repository import DuplicateEntryError, RepositoryError
from blogadmin.apps.blog.models.post import Post
from blogadmin.apps.blog.repositories.post_repository import PostRepository
from blogadmin.apps.blog.schemas.post import PostForm
from blogadmin.apps.blog.services.post_service import PostService

ALL_FIELDS = {
    "title": "Title is required",
    "slug": "Slug is required",
    "markdown": "Markdown is required",
}

VALID = {"title": "New title", "slug": "new-slug", "markdown": "Body"}


@pytest.fixture
def repository():
    repo = AsyncMock(spec=PostRepository)
    repo.model = Post
    return repo


@pytest.fixture
def service(repository):
    return PostService(repository)


def existing_post(slug="old-slug"):
    return Post(id=1, title="Old title", slug=slug, markdown="Old body")


class TestValidateForm:
    """Presence validation of the three form fields."""

    @pytest.mark.parametrize(
        "missing",
        [
            ["title"],
            ["slug"],
            ["markdown"],
            ["title", "slug"],
            ["slug", "markdown"],
            ["title", "markdown"],
            ["title", "slug", "markdown"],
        ],
    )
    def test_reports_exactly_missing_fields(self, missing):
        values = {**VALID, **{field: "" for field in missing}}

        errors = PostService.validate_form(PostForm(**values))

        assert errors.has_errors
        assert errors.as_dict() == {field: ALL_FIELDS[field] for field in missing}

    def test_complete_form_has_no_errors(self):
        errors = PostService.validate_form(PostForm(**VALID))

        assert not errors.has_errors
        assert errors.as_dict() == {}

    def test_whitespace_counts_as_present(self):
        errors = PostService.validate_form(PostForm(title=" ", slug="s", markdown="\n"))

        assert not errors.has_errors


class TestGetPost:

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, service, repository):
        repository.get_post.return_value = None

        with pytest.raises(exceptions.NotFoundException) as exc_info:
            await service.get_post("nope")

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Post not found: nope"
        repository.get_post.assert_awaited_once_with("nope")

    @pytest.mark.asyncio
    async def test_returns_stored_post(self, service, repository):
        post = existing_post()
        repository.get_post.return_value = post

        assert await service.get_post("old-slug") is post

    @pytest.mark.asyncio
    async def test_repository_error_becomes_service_exception(self, service, repository):
        repository.get_post.side_effect = RepositoryError("boom")

        with pytest.raises(exceptions.ServiceException) as exc_info:
            await service.get_post("old-slug")

        assert exc_info.value.status_code == 500


class TestUpdatePost:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "slug", "markdown"])
    async def test_invalid_form_never_persists(self, service, repository, missing):
        form = PostForm(**{**VALID, missing: ""})

        with pytest.raises(exceptions.ValidationException) as exc_info:
            await service.update_post("old-slug", form)

        details = exc_info.value.error_details
        assert [(d.field, d.message) for d in details] == [(missing, ALL_FIELDS[missing])]
        repository.update_post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_valid_form_persists_once_with_submitted_values(self, service, repository):
        form = PostForm(**VALID)
        updated = Post(id=1, **VALID)
        repository.get_post.side_effect = [existing_post(), None]
        repository.update_post.return_value = updated

        result = await service.update_post("old-slug", form)

        assert result is updated
        repository.update_post.assert_awaited_once_with(form, current_slug="old-slug")

    @pytest.mark.asyncio
    async def test_same_slug_skips_conflict_lookup(self, service, repository):
        form = PostForm(title="T", slug="old-slug", markdown="M")
        repository.get_post.return_value = existing_post()
        repository.update_post.return_value = Post(id=1, title="T", slug="old-slug", markdown="M")

        await service.update_post("old-slug", form)

        repository.get_post.assert_awaited_once_with("old-slug")
        repository.update_post.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_slug_owned_by_other_post_conflicts(self, service, repository):
        repository.get_post.side_effect = [existing_post(), existing_post("new-slug")]

        with pytest.raises(exceptions.ConflictException) as exc_info:
            await service.update_post("old-slug", PostForm(**VALID))

        assert exc_info.value.status_code == 409
        assert exc_info.value.error_details[0].field == "slug"
        assert exc_info.value.error_details[0].message == "Slug is already taken"
        repository.update_post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, service, repository):
        repository.get_post.return_value = None

        with pytest.raises(exceptions.NotFoundException):
            await service.update_post("gone", PostForm(**VALID))

        repository.update_post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_post_vanishing_before_write_raises_not_found(self, service, repository):
        repository.get_post.side_effect = [existing_post(), None]
        repository.update_post.return_value = None

        with pytest.raises(exceptions.NotFoundException):
            await service.update_post("old-slug", PostForm(**VALID))

    @pytest.mark.asyncio
    async def test_unique_violation_on_write_becomes_conflict(self, service, repository):
        repository.get_post.side_effect = [existing_post(), None]
        repository.update_post.side_effect = DuplicateEntryError("UNIQUE constraint failed")

        with pytest.raises(exceptions.ConflictException) as exc_info:
            await service.update_post("old-slug", PostForm(**VALID))

        assert exc_info.value.status_code == 409
        assert exc_info.value.error_details[0].field == "slug"
        assert exc_info.value.error_details[0].message == "Slug is already taken"

    @pytest.mark.asyncio
    async def test_other_write_errors_stay_service_errors(self, service, repository):
        repository.get_post.side_effect = [existing_post(), None]
        repository.update_post.side_effect = RepositoryError("disk full")

        with pytest.raises(exceptions.ServiceException) as exc_info:
            await service.update_post("old-slug", PostForm(**VALID))

        assert exc_info.value.status_code == 500
