"""Shared fixtures: a temporary SQLite database wired into the app."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool
from sqlmodel import Session, SQLModel, create_engine, select

from blogadmin.main import app
from blogadmin.core.database import Database
from blogadmin.apps.blog.models.post import Post
from blogadmin.apps.blog.repositories.post_repository import PostRepository
from blogadmin.apps.blog.routers.post_router import get_post_service
from blogadmin.apps.blog.services.post_service import PostService


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
def sync_engine(db_path):
    """Synchronous engine used to create tables and seed/inspect rows."""
    engine = create_engine(f"sqlite:///{db_path}")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def test_db(db_path, sync_engine):
    return Database(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)


@pytest.fixture
def seed_post(sync_engine):
    """Insert a post and return it."""
    def _seed(title="Hello", slug="hello", markdown="# Hello\n\nFirst post."):
        with Session(sync_engine, expire_on_commit=False) as session:
            post = Post(title=title, slug=slug, markdown=markdown)
            session.add(post)
            session.commit()
            session.refresh(post)
            return post
    return _seed


@pytest.fixture
def fetch_post(sync_engine):
    """Read a post straight from the database, bypassing the app."""
    def _fetch(slug):
        with Session(sync_engine, expire_on_commit=False) as session:
            return session.exec(select(Post).where(Post.slug == slug)).first()
    return _fetch


@pytest.fixture
def client(test_db):
    """FastAPI test client pointed at the temporary database."""
    app.dependency_overrides[get_post_service] = lambda: PostService(
        PostRepository(test_db.get_session)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
