"""
Landing page for API v1.

The root route renders a small HTML fragment with a random aphorism
in a random color.  Nothing here is persisted; every request gets a
fresh color and quote.
"""

import html

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, Response

from movie_service_api.app.core.config import Settings, get_app_settings
from movie_service_api.app.services.aphorism_service import AphorismService
from movie_service_api.app.services.color_service import random_color

router = APIRouter()

PAGE_TEMPLATE = """
<p style="text-align: center; font-size: 2em; color: {color}">
    {message} <br> - <span style="font-style: italic;">{author}</span>
</p>
"""


@router.get("/", response_class=HTMLResponse)
def landing_page(settings: Settings = Depends(get_app_settings)) -> HTMLResponse:
    """Render an aphorism in a random color."""
    color = random_color()
    message, author = AphorismService.random_quote(settings.aphorisms_path)
    page = PAGE_TEMPLATE.format(
        color=color,
        message=html.escape(message),
        author=html.escape(author),
    )
    return HTMLResponse(content=page)


@router.get("/favicon.ico", include_in_schema=False)
def favicon() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)
