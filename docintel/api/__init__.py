"""
JSON API for the document intelligence system.
"""
from .app import create_app

__all__ = ["create_app"]
