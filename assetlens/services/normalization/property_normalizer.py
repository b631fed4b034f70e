"""Normalization of parcel records into land assessment values."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional

from assetlens.core.config import settings
from assetlens.core.exceptions import NoComparableDataError
from assetlens.schemas.land import LandAssessmentResultCreate
from assetlens.services.normalization.constants import PROPERTY_FIELDS, SQFT_PER_ACRE
from assetlens.services.normalization.field_resolver import resolve_field, to_decimal, to_int
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

ACRE_PRECISION = Decimal("0.0001")


@dataclass(frozen=True)
class NormalizedPropertyFields:
    """Canonical parcel values, in dollars and acres."""

    assessed_value: Decimal
    market_value: Decimal
    land_value: Decimal
    improvement_value: Decimal
    property_type: str
    lot_size: Optional[Decimal]
    year_built: Optional[int]
    owner_name: Optional[str]
    apn: Optional[str]

    def to_result(self, request_id: Optional[str]) -> LandAssessmentResultCreate:
        return LandAssessmentResultCreate(
            request_id=request_id,
            assessed_value=self.assessed_value,
            market_value=self.market_value,
            land_value=self.land_value,
            improvement_value=self.improvement_value,
            property_type=self.property_type,
            lot_size=self.lot_size,
            year_built=self.year_built,
            owner_name=self.owner_name,
            apn=self.apn,
        )


class PropertyNormalizer:
    """Converts a raw parcel record into ``NormalizedPropertyFields``.

    Rules:
        * lot size comes from an acreage field, else square feet / 43,560
        * market value is the assessed value plus a fixed markup, else
          land + improvement value; provider market fields are not consulted
        * property type is the first non-empty use or zoning description
    """

    def __init__(self, market_value_markup: Optional[Decimal] = None):
        """Initialize the normalizer.

        Args:
            market_value_markup: Fraction added to assessed value to estimate
                market value (0.10 means +10%)
        """
        if market_value_markup is None:
            market_value_markup = settings.policy.market_value_markup
        self.market_value_markup = Decimal(str(market_value_markup))

    def normalize(self, raw_fields: Mapping[str, Any]) -> NormalizedPropertyFields:
        """Normalize one parcel record.

        Args:
            raw_fields: Parcel properties, values at the top level or nested
                under ``fields``

        Returns:
            NormalizedPropertyFields

        Raises:
            NoComparableDataError: If the parcel carries no usable value
        """
        assessed_value = self._money(raw_fields, "assessed_value")
        land_value = self._money(raw_fields, "land_value")
        improvement_value = self._money(raw_fields, "improvement_value")

        if not any((assessed_value, land_value, improvement_value)):
            LOGGER.warning(f"Parcel has no usable values; keys seen: {sorted(raw_fields.keys())}")
            raise NoComparableDataError(
                "Parcel record has no assessed, land or improvement value",
                user_message="Unable to determine property value for this address.",
            )

        market_value = self.compute_market_value(assessed_value, land_value, improvement_value)

        return NormalizedPropertyFields(
            assessed_value=assessed_value,
            market_value=market_value,
            land_value=land_value,
            improvement_value=improvement_value,
            property_type=str(resolve_field(raw_fields, PROPERTY_FIELDS["property_type"])),
            lot_size=self.compute_lot_size(raw_fields),
            year_built=self._year_built(raw_fields),
            owner_name=self._text(raw_fields, "owner_name"),
            apn=self._text(raw_fields, "apn"),
        )

    def compute_market_value(
        self,
        assessed_value: Decimal,
        land_value: Decimal,
        improvement_value: Decimal,
    ) -> Decimal:
        if assessed_value > 0:
            estimate = assessed_value * (1 + self.market_value_markup)
            return estimate.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return land_value + improvement_value

    @staticmethod
    def compute_lot_size(raw_fields: Mapping[str, Any]) -> Optional[Decimal]:
        """Lot size in acres, converted from square feet when needed."""
        acres = to_decimal(resolve_field(raw_fields, PROPERTY_FIELDS["lot_acres"]), "lot_acres")
        if acres is not None:
            return acres

        sqft = to_decimal(resolve_field(raw_fields, PROPERTY_FIELDS["lot_sqft"]), "lot_sqft")
        if sqft is not None:
            return (sqft / SQFT_PER_ACRE).quantize(ACRE_PRECISION, rounding=ROUND_HALF_UP)

        return None

    @staticmethod
    def _money(raw_fields: Mapping[str, Any], name: str) -> Decimal:
        spec = PROPERTY_FIELDS[name]
        value = to_decimal(resolve_field(raw_fields, spec), name)
        return value if value is not None else Decimal(spec.default)

    @staticmethod
    def _text(raw_fields: Mapping[str, Any], name: str) -> Optional[str]:
        value = resolve_field(raw_fields, PROPERTY_FIELDS[name])
        return str(value) if value is not None else None

    @staticmethod
    def _year_built(raw_fields: Mapping[str, Any]) -> Optional[int]:
        year = to_int(resolve_field(raw_fields, PROPERTY_FIELDS["year_built"]), "year_built")
        # Providers report unknown construction year as 0
        return year if year and year > 0 else None
