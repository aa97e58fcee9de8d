"""High-level OpenSDS client entrypoints."""
from .client import OpenSDSClient
from .config import ClientConfig
from .exceptions import OpenSDSError
from .model import VolumeSpec

__all__ = ["OpenSDSClient", "ClientConfig", "OpenSDSError", "VolumeSpec"]
