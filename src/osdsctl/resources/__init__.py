"""Resource-specific convenience wrappers."""
from .volumes import VolumesResource

__all__ = ["VolumesResource"]
