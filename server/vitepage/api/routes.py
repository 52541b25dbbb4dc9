"""
HTTP routes for the page server.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render the page template."""
    settings = request.app.state.settings
    renderer = request.app.state.renderer
    return renderer.render(request, {"title": settings.page_title})
