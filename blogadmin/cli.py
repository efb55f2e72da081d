import asyncio

import typer
import uvicorn

from blogadmin.core.config import settings
from blogadmin.core.database import Database, create_tables
from blogadmin.apps.blog.repositories.post_repository import PostRepository
from blogadmin.apps.blog.schemas.post import PostForm
from blogadmin.apps.blog.services.post_service import PostService

app = typer.Typer(help="Blog admin management commands.")


# ---------------------------
# Helpers
# ---------------------------
def get_database() -> Database:
    return Database(settings.ASYNC_DATABASE_URL)


def get_repository(database: Database) -> PostRepository:
    return PostRepository(database.get_session)


# ---------------------------
# Commands
# ---------------------------
@app.command()
def init_db():
    """Create database tables."""
    database = get_database()
    asyncio.run(create_tables(database.engine))
    print(f"✅ Tables created at {database.engine.url}")


@app.command()
def seed(
    title: str,
    slug: str,
    markdown: str = typer.Option("", "--markdown", "-m", help="Post body"),
    markdown_file: typer.FileText = typer.Option(None, "--file", "-f", help="Read the body from a file"),
):
    """Insert a post."""
    if markdown_file is not None:
        markdown = markdown_file.read()

    form = PostForm(title=title, slug=slug, markdown=markdown)
    errors = PostService.validate_form(form)
    if errors.has_errors:
        for message in errors.as_dict().values():
            print(f"❌ {message}")
        raise typer.Exit(1)

    database = get_database()

    async def _seed():
        await create_tables(database.engine)
        return await get_repository(database).create_post(form)

    post = asyncio.run(_seed())
    print(f"✅ Created post '{post.title}' at /posts/admin/{post.slug}")


@app.command()
def show(slug: str):
    """Print a post by slug."""
    post = asyncio.run(get_repository(get_database()).get_post(slug))
    if post is None:
        print(f"❌ Post not found: {slug}")
        raise typer.Exit(1)

    print(f"🏷️  {post.title} ({post.slug})")
    print(post.markdown)


@app.command(name="list")
def list_posts(limit: int = typer.Option(100, "--limit", "-n")):
    """List stored posts."""
    posts = asyncio.run(get_repository(get_database()).list_posts(limit=limit))
    if not posts:
        print("📁 No posts found.")
        return

    for post in posts:
        print(f"  📄 {post.slug}: {post.title}")


@app.command()
def serve(
    host: str = typer.Option(settings.HOST, help="Bind address"),
    port: int = typer.Option(settings.PORT, help="Bind port"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
):
    """Run the admin server."""
    uvicorn.run("blogadmin.main:app", host=host, port=port, reload=reload, log_level="info")


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
