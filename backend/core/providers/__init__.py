from .base import HTTPProvider, ProviderError
from .google_pollen import GooglePollenProvider

__all__ = ["GooglePollenProvider", "HTTPProvider", "ProviderError"]
