"""Post model."""

from sqlmodel import Field
from blogadmin.core.database import BaseModel


class Post(BaseModel, table=True):
    """Post model class."""

    __tablename__ = "blog_posts"  # type: ignore
    title: str = Field()
    slug: str = Field(index=True, unique=True)
    markdown: str = Field()
