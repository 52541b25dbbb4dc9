"""Shared fixtures for page server tests."""

import json

import pytest

from vitepage.config import Settings, get_settings


SAMPLE_MANIFEST = {
    "src/main.js": {
        "file": "assets/main-4f2a9c1b.js",
        "src": "src/main.js",
        "isEntry": True,
        "css": ["assets/main-8d3e77aa.css"],
    },
}


def write_manifest(dist_dir, content):
    """Write `content` to <dist_dir>/.vite/manifest.json and return the path."""
    manifest_dir = dist_dir / ".vite"
    manifest_dir.mkdir(parents=True, exist_ok=True)
    path = manifest_dir / "manifest.json"
    if isinstance(content, str):
        path.write_text(content, encoding="utf-8")
    else:
        path.write_text(json.dumps(content), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def dist_dir(tmp_path):
    """A build output directory with a manifest and the files it names."""
    dist = tmp_path / "dist"
    assets = dist / "assets"
    assets.mkdir(parents=True)
    (assets / "main-4f2a9c1b.js").write_bytes(b'console.log("built");\n')
    (assets / "main-8d3e77aa.css").write_bytes(b"body { margin: 0; }\n")
    write_manifest(dist, SAMPLE_MANIFEST)
    return dist


@pytest.fixture()
def production_settings(dist_dir):
    return Settings(app_env="production", dist_dir=str(dist_dir), page_title="Prod Page")


@pytest.fixture()
def development_settings(tmp_path):
    return Settings(
        app_env="development",
        dist_dir=str(tmp_path / "does-not-exist"),
        page_title="Dev Page",
    )
