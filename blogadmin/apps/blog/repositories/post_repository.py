"""Post repository."""

from typing import List, Optional

from blogadmin.core.bases.base_repository import BaseRepository
from blogadmin.apps.blog.models.post import Post
from blogadmin.apps.blog.schemas.post import PostForm


class PostRepository(BaseRepository[Post]):
    """Post repository class."""

    model = Post

    async def get_post(self, slug: str) -> Optional[Post]:
        return await self.get_one(slug=slug)

    async def list_posts(self, limit: int = 100) -> List[Post]:
        return await self.get_many(limit=limit)

    async def create_post(self, post_in: PostForm) -> Post:
        return await self.create(post_in.model_dump())

    async def update_post(
        self, post_in: PostForm, current_slug: Optional[str] = None
    ) -> Optional[Post]:
        """Replace title, slug and markdown of one post.

        The post is located by ``current_slug`` when given, else by the
        submitted slug.
        """
        return await self.update_one(
            post_in.model_dump(), slug=current_slug or post_in.slug
        )
