"""Vehicle valuation workflow."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from assetlens.core.exceptions import ValidationError
from assetlens.database.models import User
from assetlens.repositories.store import BaseStore
from assetlens.schemas.assets import AssetType, UserAssetCreate
from assetlens.schemas.valuation import ValuationRequestCreate, ValuationResponse, ValuationResultCreate
from assetlens.services.base_service import BaseService
from assetlens.services.normalization import NormalizedVehicleFields, VehicleNormalizer
from assetlens.services.providers.marketcheck_client import MarketCheckClient
from assetlens.services.records_service import RecordService
from assetlens.services.valuation import LoanTerms, compute_loan, select_base_value
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

CENTS = Decimal("0.01")
EARLIEST_MODEL_YEAR = 1900


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class VehicleValuationService(BaseService):
    """Prices a vehicle from comparable listings and estimates financing.

    The request row is written before the provider is called, so a failed
    lookup leaves a request without a result. That request is then simply
    reported as not found.
    """

    def __init__(
        self,
        store: BaseStore,
        client: Optional[MarketCheckClient] = None,
        normalizer: Optional[VehicleNormalizer] = None,
        loan_terms: Optional[LoanTerms] = None,
    ):
        super().__init__()
        self.store = store
        self.records = RecordService(store)
        self.client = client or MarketCheckClient()
        self.normalizer = normalizer or VehicleNormalizer()
        self.loan_terms = loan_terms or LoanTerms.from_settings()

    def validate(self, data: ValuationRequestCreate, owner: Optional[User] = None):
        latest_model_year = datetime.now(timezone.utc).year + 1
        if not (EARLIEST_MODEL_YEAR <= data.year <= latest_model_year):
            raise ValidationError(
                f"Model year {data.year} outside {EARLIEST_MODEL_YEAR}-{latest_model_year}"
            )

    async def run(self, data: ValuationRequestCreate, owner: Optional[User] = None) -> ValuationResponse:
        """Value a vehicle end to end.

        Args:
            data: Validated vehicle form data
            owner: User to attribute the request and the portfolio entry to

        Returns:
            ValuationResponse combined view

        Raises:
            ConfigurationError: If the listing provider is not configured
            ProviderUnavailableError: If the listing provider cannot be reached
            NoComparableDataError: If no comparable listing has a usable price
        """
        data = data.model_copy(update={"user_id": owner.id if owner is not None else None})

        request = await self.records.create_valuation_request(data)

        listings = await self.client.search_listings(data)
        tiers = self.normalizer.normalize(listings)
        LOGGER.info(
            f"Valuation {request.id}: {tiers.sample_size} comparables, "
            f"range {tiers.min_price}-{tiers.max_price}"
        )

        result = await self.records.create_valuation_result(self.build_result(request.id, tiers))

        if owner is not None:
            await self.store.create_user_asset(
                UserAssetCreate(user_id=owner.id, asset_type=AssetType.VEHICLE, asset_id=request.id)
            )

        return RecordService.build_valuation_report(request, result)

    def build_result(self, request_id: str, tiers: NormalizedVehicleFields) -> ValuationResultCreate:
        """Price tiers plus the loan estimate against the first non-zero tier."""
        base_value = select_base_value(tiers.trade_in_value, tiers.private_party_value, tiers.retail_value)
        loan = compute_loan(
            base_value,
            self.loan_terms.ltv_ratio,
            self.loan_terms.annual_rate_percent,
            self.loan_terms.term_months,
        )
        return ValuationResultCreate(
            request_id=request_id,
            trade_in_value=tiers.trade_in_value,
            private_party_value=tiers.private_party_value,
            retail_value=tiers.retail_value,
            loan_amount=to_cents(loan.loan_amount),
            ltv_ratio=to_cents(self.loan_terms.ltv_ratio * 100),
            estimated_rate=to_cents(self.loan_terms.annual_rate_percent),
            monthly_payment=to_cents(loan.monthly_payment),
        )
