"""Response DTOs for the product routes.

Field names are snake_case in Python and camelCase on the wire.
Unbounded numeric limits are rendered as null.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductDTO(CamelModel):
    id: int
    name: str
    price: float
    description: str
    image_url: str
    rating: float
    specs: dict[str, str]


class PaginationDTO(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class ProductListResponseDTO(CamelModel):
    success: bool = True
    data: list[ProductDTO]
    pagination: PaginationDTO
    search_term: str = Field(description="Sanitized search term ('' when not searching)")


class ProductDetailResponseDTO(CamelModel):
    success: bool = True
    data: ProductDTO
    found: bool = True


class ProductBulkResponseDTO(CamelModel):
    success: bool = True
    data: list[ProductDTO]
    count: int
    requested_ids: list[int]
    found_ids: list[int]


# ==============================================================================
# Statistics
# ==============================================================================


class ValueRangeDTO(CamelModel):
    min: float
    max: float


class CategorySummaryDTO(CamelModel):
    count: int
    average_price: float
    average_rating: float
    products: list[ProductDTO]


class PriceSegmentDTO(CamelModel):
    min: float
    max: float | None = Field(description="Exclusive upper bound; null when unbounded")
    count: int
    products: list[ProductDTO]


class RatingBucketDTO(CamelModel):
    min: float
    max: float
    count: int
    percentage: float


class ProductStatsDTO(CamelModel):
    total: int
    average_price: float
    average_rating: float
    price_range: ValueRangeDTO
    rating_range: ValueRangeDTO
    categories: dict[str, CategorySummaryDTO]
    price_segments: dict[str, PriceSegmentDTO]
    rating_distribution: dict[str, RatingBucketDTO]
    last_updated: datetime


class ProductStatsResponseDTO(CamelModel):
    success: bool = True
    data: ProductStatsDTO


# ==============================================================================
# Filters & analysis
# ==============================================================================


class PriceRangeDTO(CamelModel):
    min: float
    max: float | None = Field(description="Inclusive upper bound; null when unbounded")


class NoResultsAnalysisDTO(CamelModel):
    message: str
    suggestions: list[str]


class PriceRangeAnalysisDTO(CamelModel):
    average_price: float
    average_rating: float
    price_range_utilization: float
    best_value: ProductDTO


class RatingAnalysisDTO(CamelModel):
    average_price: float
    average_rating: float
    rating_distribution: dict[str, RatingBucketDTO]
    top_rated: list[ProductDTO]


class SpecificationCountDTO(CamelModel):
    specification: str
    count: int


class SpecificationAnalysisDTO(CamelModel):
    average_price: float
    average_rating: float
    common_specifications: list[SpecificationCountDTO]
    related_products: list[ProductDTO]


class PriceFilterResponseDTO(CamelModel):
    success: bool = True
    data: list[ProductDTO]
    count: int
    price_range: PriceRangeDTO
    analysis: PriceRangeAnalysisDTO | NoResultsAnalysisDTO


class RatingFilterResponseDTO(CamelModel):
    success: bool = True
    data: list[ProductDTO]
    count: int
    min_rating: float
    analysis: RatingAnalysisDTO | NoResultsAnalysisDTO


class SpecificationSearchResponseDTO(CamelModel):
    success: bool = True
    data: list[ProductDTO]
    count: int
    search_term: str
    analysis: SpecificationAnalysisDTO | NoResultsAnalysisDTO
