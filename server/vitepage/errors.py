"""
Startup error hierarchy.

Anything raised from this module during application construction is a
deployment-configuration problem: the entry point logs it and exits
before a port is bound.
"""


class StartupError(Exception):
    """Base class for errors that must stop the process from starting."""


class ManifestError(StartupError):
    """The production asset manifest could not be loaded."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ManifestReadError(ManifestError):
    """Manifest file is missing or unreadable."""


class ManifestParseError(ManifestError):
    """Manifest file is not valid JSON or not shaped like a Vite manifest."""


class TemplateLoadError(StartupError):
    """Page template is missing or fails to parse."""
