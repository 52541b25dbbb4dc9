"""
Page template rendering.
"""

import logging
from typing import Any, Dict, Optional

import jinja2
from fastapi import Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from vitepage.assets import AssetResolver
from vitepage.errors import TemplateLoadError

logger = logging.getLogger(__name__)

ASSETS_HELPER_NAME = "vite_assets"


class PageRenderer:
    """
    Renders a single named template with the asset resolver available
    inside it as `vite_assets(...)`.

    The template is parsed once at construction. Rendering failures are
    contained per request.
    """

    def __init__(self, templates_dir: str, template_name: str, resolver: AssetResolver):
        self.template_name = template_name
        # Parsed once at startup, later edits on disk are ignored
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(templates_dir),
            autoescape=True,
            auto_reload=False,
        )
        self.templates = Jinja2Templates(env=env)
        self.templates.env.globals[ASSETS_HELPER_NAME] = resolver

        try:
            self.template = self.templates.get_template(template_name)
        except jinja2.TemplateError as e:
            raise TemplateLoadError(
                f"Failed to parse template '{template_name}' in '{templates_dir}': {e}"
            ) from e

    def render(self, request: Request, data: Optional[Dict[str, Any]] = None) -> Response:
        """Execute the template, or return a bare 500 if it fails."""
        try:
            return self.templates.TemplateResponse(request, self.template_name, data or {})
        except Exception:
            logger.exception(f"Error executing template '{self.template_name}'")
            return PlainTextResponse("Internal Server Error", status_code=500)
