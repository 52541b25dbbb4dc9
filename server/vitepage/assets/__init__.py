"""Vite asset handling."""

from vitepage.assets.manifest import Manifest, ManifestEntry, load_manifest
from vitepage.assets.resolver import AssetResolver

__all__ = [
    "Manifest",
    "ManifestEntry",
    "load_manifest",
    "AssetResolver",
]
