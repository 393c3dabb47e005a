"""
External API integrations: the shared async HTTP client.
"""

from .api_client import APIClient

__all__ = ["APIClient"]
