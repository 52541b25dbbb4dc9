"""
Vite build manifest loading.

Vite writes `<outDir>/.vite/manifest.json` when `build.manifest` is on. The
file maps each source entrypoint (e.g. "src/main.js") to its hashed output
file and the stylesheets extracted from it.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from vitepage.errors import ManifestParseError, ManifestReadError

logger = logging.getLogger(__name__)


class ManifestEntry(BaseModel):
    """One chunk of the Vite manifest."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    file: str
    css: List[str] = Field(default_factory=list)
    src: Optional[str] = None
    is_entry: bool = Field(default=False, alias="isEntry")

    @field_validator("css", mode="before")
    @classmethod
    def _null_css_is_empty(cls, value):
        return [] if value is None else value


Manifest = Dict[str, ManifestEntry]

# A top-level null is read as an empty manifest
_manifest_adapter = TypeAdapter(Optional[Manifest])


def load_manifest(path: Union[str, Path]) -> Manifest:
    """
    Read and parse the manifest at `path`.

    Raises ManifestReadError when the file cannot be read and
    ManifestParseError when its contents are not a valid manifest.
    There are no retries: both are treated as fatal.
    """
    path = Path(path)
    logger.info("Production mode: Attempting to load manifest...")

    try:
        content = path.read_bytes()
    except OSError as e:
        raise ManifestReadError(path, f"failed to read manifest file: {e}") from e

    try:
        manifest = _manifest_adapter.validate_json(content) or {}
    except ValidationError as e:
        raise ManifestParseError(path, f"failed to parse manifest file: {e}") from e

    logger.info(f"Successfully loaded production asset manifest ({len(manifest)} entries)")
    return manifest
