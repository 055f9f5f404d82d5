"""HTTP API for ecodamage."""

from ecodamage.api.app import create_app

__all__ = ["create_app"]
