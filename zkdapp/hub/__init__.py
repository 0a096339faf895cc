"""
zkWasm Hub Integration

Client and response models for the zkWasm hub image catalog.
"""

from .client import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT, HubClient, HubError
from .models import ImageQueryResponse, ImageRecord

__all__ = [
    "DEFAULT_ENDPOINT",
    "DEFAULT_TIMEOUT",
    "HubClient",
    "HubError",
    "ImageQueryResponse",
    "ImageRecord",
]
