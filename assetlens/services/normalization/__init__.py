"""Provider payload normalization."""

from assetlens.services.normalization.field_resolver import resolve, resolve_field
from assetlens.services.normalization.property_normalizer import NormalizedPropertyFields, PropertyNormalizer
from assetlens.services.normalization.vehicle_normalizer import NormalizedVehicleFields, VehicleNormalizer

__all__ = [
    "resolve",
    "resolve_field",
    "NormalizedPropertyFields",
    "PropertyNormalizer",
    "NormalizedVehicleFields",
    "VehicleNormalizer",
]
