"""Post edit form view."""

import html as _html
from typing import Optional

from blogadmin.apps.blog.schemas.post import PostForm, PostFormErrors

INPUT_CLASS = "w-full rounded border border-gray-500 px-2 py-1 text-lg"


def _error(message: Optional[str]) -> str:
    if not message:
        return ""
    return f'<em class="text-red-600">{_html.escape(message)}</em>'


def render_edit_form(
    values: PostForm,
    action: str,
    errors: Optional[PostFormErrors] = None,
) -> str:
    """Render the edit form pre-filled with ``values``.

    ``errors`` holds the per-field messages of a rejected submission.
    """
    errors = errors or PostFormErrors()
    title = _html.escape(values.title)
    slug = _html.escape(values.slug)
    markdown = _html.escape(values.markdown)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>Edit {title}</title>
</head>
<body>
    <form method="post" action="{_html.escape(action)}">
        <p>
            <label>
                Post Title: {_error(errors.title)}
                <input type="text" name="title" class="{INPUT_CLASS}" value="{title}">
            </label>
        </p>
        <p>
            <label>
                Post Slug: {_error(errors.slug)}
                <input type="text" name="slug" class="{INPUT_CLASS}" value="{slug}">
            </label>
        </p>
        <p>
            <label for="markdown">
                Markdown: {_error(errors.markdown)}
            </label>
            <br>
            <textarea id="markdown" rows="20" name="markdown" class="{INPUT_CLASS} font-mono">{markdown}</textarea>
        </p>
        <p class="text-right">
            <button type="submit" class="rounded bg-blue-500 py-2 px-4 text-white hover:bg-blue-600 focus:bg-blue-400 disabled:bg-blue-300">Update Post</button>
        </p>
    </form>
</body>
</html>
"""
