"""Third-party data provider clients."""

from assetlens.services.providers.base_client import BaseProviderClient
from assetlens.services.providers.marketcheck_client import MarketCheckClient
from assetlens.services.providers.regrid_client import RegridClient

__all__ = [
    "BaseProviderClient",
    "MarketCheckClient",
    "RegridClient",
]
