from __future__ import annotations

import math
from typing import Iterable

from product_catalog.domain.analysis import (
    CategorySummary,
    NoResultsAnalysis,
    PriceRangeAnalysis,
    PriceSegment,
    RatingAnalysis,
    RatingBucket,
    ResultAnalysis,
    SpecificationAnalysis,
)
from product_catalog.domain.product import PaginationMeta, Product
from product_catalog.entrypoints.http.dtos.products import (
    CategorySummaryDTO,
    NoResultsAnalysisDTO,
    PaginationDTO,
    PriceFilterResponseDTO,
    PriceRangeAnalysisDTO,
    PriceRangeDTO,
    PriceSegmentDTO,
    ProductBulkResponseDTO,
    ProductDetailResponseDTO,
    ProductDTO,
    ProductListResponseDTO,
    ProductStatsDTO,
    ProductStatsResponseDTO,
    RatingAnalysisDTO,
    RatingBucketDTO,
    RatingFilterResponseDTO,
    SpecificationAnalysisDTO,
    SpecificationCountDTO,
    SpecificationSearchResponseDTO,
    ValueRangeDTO,
)
from product_catalog.use_cases.filter_products_by_price import FilterProductsByPriceResponse
from product_catalog.use_cases.filter_products_by_rating import FilterProductsByRatingResponse
from product_catalog.use_cases.get_product_by_id import GetProductByIdResponse
from product_catalog.use_cases.get_product_stats import ProductStatsReport
from product_catalog.use_cases.get_products_by_ids import GetProductsByIdsResponse
from product_catalog.use_cases.list_products import ListProductsResponse
from product_catalog.use_cases.search_products_by_specification import (
    SearchProductsBySpecificationResponse,
)


def _bound(value: float) -> float | None:
    """Infinite bounds have no JSON representation; render them as null."""
    return None if math.isinf(value) else value


class ProductMapper:
    """Maps domain results to REST response DTOs."""

    @staticmethod
    def to_product_response(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            image_url=product.image_url,
            rating=product.rating,
            specs=dict(product.specs),
        )

    @staticmethod
    def to_product_list(products: Iterable[Product]) -> list[ProductDTO]:
        return [ProductMapper.to_product_response(product) for product in products]

    @staticmethod
    def to_pagination(pagination: PaginationMeta) -> PaginationDTO:
        return PaginationDTO(
            page=pagination.page,
            limit=pagination.limit,
            total=pagination.total,
            total_pages=pagination.total_pages,
            has_next=pagination.has_next,
            has_prev=pagination.has_prev,
        )

    @staticmethod
    def to_list_response(result: ListProductsResponse) -> ProductListResponseDTO:
        return ProductListResponseDTO(
            data=ProductMapper.to_product_list(result.products),
            pagination=ProductMapper.to_pagination(result.pagination),
            search_term=result.search_term,
        )

    @staticmethod
    def to_detail_response(result: GetProductByIdResponse) -> ProductDetailResponseDTO:
        return ProductDetailResponseDTO(
            data=ProductMapper.to_product_response(result.product),
            found=result.found,
        )

    @staticmethod
    def to_bulk_response(result: GetProductsByIdsResponse) -> ProductBulkResponseDTO:
        return ProductBulkResponseDTO(
            data=ProductMapper.to_product_list(result.products),
            count=result.count,
            requested_ids=result.requested_ids,
            found_ids=result.found_ids,
        )

    # ==========================================================================
    # Statistics
    # ==========================================================================

    @staticmethod
    def to_category_summary(summary: CategorySummary) -> CategorySummaryDTO:
        return CategorySummaryDTO(
            count=summary.count,
            average_price=summary.average_price,
            average_rating=summary.average_rating,
            products=ProductMapper.to_product_list(summary.products),
        )

    @staticmethod
    def to_price_segment(segment: PriceSegment) -> PriceSegmentDTO:
        return PriceSegmentDTO(
            min=segment.min,
            max=_bound(segment.max),
            count=segment.count,
            products=ProductMapper.to_product_list(segment.products),
        )

    @staticmethod
    def to_rating_distribution(
        distribution: dict[str, RatingBucket],
    ) -> dict[str, RatingBucketDTO]:
        return {
            name: RatingBucketDTO(
                min=bucket.min,
                max=bucket.max,
                count=bucket.count,
                percentage=bucket.percentage,
            )
            for name, bucket in distribution.items()
        }

    @staticmethod
    def to_stats_response(report: ProductStatsReport) -> ProductStatsResponseDTO:
        stats = report.stats
        return ProductStatsResponseDTO(
            data=ProductStatsDTO(
                total=stats.total,
                average_price=stats.average_price,
                average_rating=stats.average_rating,
                price_range=ValueRangeDTO(min=stats.price_range.min, max=stats.price_range.max),
                rating_range=ValueRangeDTO(
                    min=stats.rating_range.min, max=stats.rating_range.max
                ),
                categories={
                    name: ProductMapper.to_category_summary(summary)
                    for name, summary in report.categories.items()
                },
                price_segments={
                    name: ProductMapper.to_price_segment(segment)
                    for name, segment in report.price_segments.items()
                },
                rating_distribution=ProductMapper.to_rating_distribution(
                    report.rating_distribution
                ),
                last_updated=report.last_updated,
            )
        )

    # ==========================================================================
    # Filters & analysis
    # ==========================================================================

    @staticmethod
    def to_analysis(
        analysis: ResultAnalysis,
    ) -> (
        PriceRangeAnalysisDTO
        | RatingAnalysisDTO
        | SpecificationAnalysisDTO
        | NoResultsAnalysisDTO
    ):
        if isinstance(analysis, NoResultsAnalysis):
            return NoResultsAnalysisDTO(
                message=analysis.message, suggestions=list(analysis.suggestions)
            )
        if isinstance(analysis, PriceRangeAnalysis):
            return PriceRangeAnalysisDTO(
                average_price=analysis.average_price,
                average_rating=analysis.average_rating,
                price_range_utilization=analysis.price_range_utilization,
                best_value=ProductMapper.to_product_response(analysis.best_value),
            )
        if isinstance(analysis, RatingAnalysis):
            return RatingAnalysisDTO(
                average_price=analysis.average_price,
                average_rating=analysis.average_rating,
                rating_distribution=ProductMapper.to_rating_distribution(
                    analysis.rating_distribution
                ),
                top_rated=ProductMapper.to_product_list(analysis.top_rated),
            )
        if isinstance(analysis, SpecificationAnalysis):
            return SpecificationAnalysisDTO(
                average_price=analysis.average_price,
                average_rating=analysis.average_rating,
                common_specifications=[
                    SpecificationCountDTO(specification=item.specification, count=item.count)
                    for item in analysis.common_specifications
                ],
                related_products=ProductMapper.to_product_list(analysis.related_products),
            )
        raise TypeError(f"Unsupported analysis type: {type(analysis).__name__}")

    @staticmethod
    def to_price_filter_response(
        result: FilterProductsByPriceResponse,
    ) -> PriceFilterResponseDTO:
        return PriceFilterResponseDTO(
            data=ProductMapper.to_product_list(result.products),
            count=result.count,
            price_range=PriceRangeDTO(
                min=result.price_range.min, max=_bound(result.price_range.max)
            ),
            analysis=ProductMapper.to_analysis(result.analysis),
        )

    @staticmethod
    def to_rating_filter_response(
        result: FilterProductsByRatingResponse,
    ) -> RatingFilterResponseDTO:
        return RatingFilterResponseDTO(
            data=ProductMapper.to_product_list(result.products),
            count=result.count,
            min_rating=result.min_rating,
            analysis=ProductMapper.to_analysis(result.analysis),
        )

    @staticmethod
    def to_specification_search_response(
        result: SearchProductsBySpecificationResponse,
    ) -> SpecificationSearchResponseDTO:
        return SpecificationSearchResponseDTO(
            data=ProductMapper.to_product_list(result.products),
            count=result.count,
            search_term=result.search_term,
            analysis=ProductMapper.to_analysis(result.analysis),
        )
