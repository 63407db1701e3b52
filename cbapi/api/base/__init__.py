"""ABOUTME: Base classes and common functionality for all API clients"""

from .client import BaseAPIClient

__all__ = ["BaseAPIClient"]
