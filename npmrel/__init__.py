"""Version/tag derivation and npm CLI wrappers for release pipelines."""

__version__ = "0.1.0"
