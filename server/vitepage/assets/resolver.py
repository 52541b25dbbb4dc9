"""
Asset reference resolution for Vite entrypoints.

Turns a list of entrypoint names (the same keys used in vite.config.js,
e.g. "src/main.js") into the <link>/<script> markup a page needs. In
development everything points at the Vite dev server; in production the
hashed file names come from the build manifest.
"""

import logging
from typing import List, Optional

from markupsafe import Markup

from vitepage.assets.manifest import Manifest

logger = logging.getLogger(__name__)

VITE_CLIENT_PATH = "@vite/client"


def _script_tag(src: str) -> str:
    return f'<script type="module" src="{src}"></script>'


def _stylesheet_tag(href: str) -> str:
    return f'<link rel="stylesheet" href="{href}">'


class AssetResolver:
    """
    Resolves entrypoints to asset markup.

    Output is returned as Markup and is not escaped again by Jinja2, so
    entrypoint names must be literals from templates, never request data.
    """

    def __init__(
        self,
        is_development: bool,
        dev_server: str = "http://localhost:5173",
        static_url_path: str = "/static",
        manifest: Optional[Manifest] = None,
        manifest_path: str = "",
    ):
        if not is_development and manifest is None:
            raise ValueError("A manifest is required in production mode")

        self.is_development = is_development
        self.dev_server = dev_server.rstrip("/")
        self.static_url_path = static_url_path.rstrip("/")
        self.manifest = manifest
        self.manifest_path = str(manifest_path)

    def __call__(self, *entrypoints: str) -> Markup:
        return self.resolve(*entrypoints)

    def resolve(self, *entrypoints: str) -> Markup:
        """Build stylesheet links followed by module scripts for `entrypoints`."""
        if self.is_development:
            return Markup(self._resolve_development(entrypoints))
        return Markup(self._resolve_production(entrypoints))

    def _resolve_development(self, entrypoints) -> str:
        scripts = [_script_tag(f"{self.dev_server}/{VITE_CLIENT_PATH}")]
        for entry in entrypoints:
            scripts.append(_script_tag(f"{self.dev_server}/{entry}"))
        return "".join(scripts)

    def _resolve_production(self, entrypoints) -> str:
        styles: List[str] = []
        scripts: List[str] = []

        for entry in entrypoints:
            chunk = self.manifest.get(entry)
            if chunk is None:
                # Soft failure: the page still renders without this bundle
                logger.warning(
                    f"Entrypoint '{entry}' not found in production manifest '{self.manifest_path}'"
                )
                continue

            scripts.append(_script_tag(f"{self.static_url_path}/{chunk.file}"))
            for css_file in chunk.css:
                styles.append(_stylesheet_tag(f"{self.static_url_path}/{css_file}"))

        return "".join(styles) + "".join(scripts)
