"""Normalization of comparable listings into vehicle price tiers."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, List, Mapping, Optional

from assetlens.core.config import settings
from assetlens.core.exceptions import ConfigurationError, NoComparableDataError
from assetlens.services.normalization.constants import LISTING_FIELDS
from assetlens.services.normalization.field_resolver import resolve_field, to_decimal
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)


def round_dollars(value: Decimal) -> Decimal:
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class NormalizedVehicleFields:
    """Price tiers derived from a population of comparable listings."""

    trade_in_value: Decimal
    private_party_value: Decimal
    retail_value: Decimal
    mean_price: Decimal
    sample_size: int
    min_price: Decimal
    max_price: Decimal


class VehicleNormalizer:
    """Derives trade-in, private-party and retail values from listing prices.

    The three tiers are fixed spreads around the mean asking price of the
    comparable listings (0.85x, 1.00x and 1.15x by default).
    """

    def __init__(
        self,
        trade_in_factor: Optional[Decimal] = None,
        retail_factor: Optional[Decimal] = None,
    ):
        if trade_in_factor is None:
            trade_in_factor = settings.policy.trade_in_factor
        if retail_factor is None:
            retail_factor = settings.policy.retail_factor

        self.trade_in_factor = Decimal(str(trade_in_factor))
        self.retail_factor = Decimal(str(retail_factor))

        if not (0 < self.trade_in_factor <= 1 <= self.retail_factor):
            raise ConfigurationError(
                f"Invalid price spread: trade-in {self.trade_in_factor}, retail {self.retail_factor}"
            )

    @staticmethod
    def collect_prices(listings: Iterable[Mapping[str, Any]]) -> List[Decimal]:
        """Valid listing prices, ascending. Non-positive and non-numeric prices are dropped."""
        prices = []
        for listing in listings or []:
            price = to_decimal(resolve_field(listing, LISTING_FIELDS["price"]), "price")
            if price is not None and price > 0:
                prices.append(price)
        return sorted(prices)

    def normalize(self, listings: Iterable[Mapping[str, Any]]) -> NormalizedVehicleFields:
        """Compute price tiers for a listing population.

        Args:
            listings: Listing records exposing a price

        Returns:
            NormalizedVehicleFields

        Raises:
            NoComparableDataError: If no listing has a positive price
        """
        prices = self.collect_prices(listings)
        if not prices:
            raise NoComparableDataError(
                "No comparable listings with a positive price",
                user_message="Unable to find similar vehicles. Please verify your vehicle details and try again.",
            )

        mean = sum(prices, Decimal(0)) / len(prices)
        LOGGER.debug(f"Derived mean price {mean} from {len(prices)} listings")

        return NormalizedVehicleFields(
            trade_in_value=round_dollars(mean * self.trade_in_factor),
            private_party_value=round_dollars(mean),
            retail_value=round_dollars(mean * self.retail_factor),
            mean_price=mean,
            sample_size=len(prices),
            min_price=prices[0],
            max_price=prices[-1],
        )
