"""Browser-driven extraction and verification against the quotes fixture site."""

__version__ = "0.1.0"
