from fastapi import APIRouter, Depends, Query

from product_catalog.entrypoints.http.dependencies import (
    get_filter_by_price_use_case,
    get_filter_by_rating_use_case,
    get_get_product_by_id_use_case,
    get_get_products_by_ids_use_case,
    get_list_products_use_case,
    get_product_stats_use_case,
    get_search_by_specification_use_case,
)
from product_catalog.entrypoints.http.dtos.products import (
    PriceFilterResponseDTO,
    ProductBulkResponseDTO,
    ProductDetailResponseDTO,
    ProductListResponseDTO,
    ProductStatsResponseDTO,
    RatingFilterResponseDTO,
    SpecificationSearchResponseDTO,
)
from product_catalog.entrypoints.http.error_responses import ErrorResponse
from product_catalog.entrypoints.http.mappers.product_mapper import ProductMapper
from product_catalog.use_cases.filter_products_by_price import (
    FilterProductsByPrice,
    FilterProductsByPriceRequest,
)
from product_catalog.use_cases.filter_products_by_rating import (
    FilterProductsByRating,
    FilterProductsByRatingRequest,
)
from product_catalog.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest
from product_catalog.use_cases.get_product_stats import GetProductStats
from product_catalog.use_cases.get_products_by_ids import (
    GetProductsByIds,
    GetProductsByIdsRequest,
)
from product_catalog.use_cases.list_products import ListProducts, ListProductsRequest
from product_catalog.use_cases.search_products_by_specification import (
    SearchProductsBySpecification,
    SearchProductsBySpecificationRequest,
)

# Query values stay raw strings here; the validation layer owns parsing,
# defaults and error codes.

router = APIRouter(tags=["Products"])

VALIDATION_ERROR_RESPONSE = {400: {"model": ErrorResponse, "description": "Validation error"}}


@router.get(
    "/products",
    response_model=ProductListResponseDTO,
    summary="List products",
    description="""
    Paginated product listing with optional free-text search.

    ## Pagination
    - page: 1..1000 (default 1)
    - limit: 1..100 (default 10)

    ## Search
    - q: case-insensitive match on name or description (max 100 chars)

    ## Example
    ```
    GET /api/products?page=1&limit=5&q=chip
    ```
    """,
    responses=VALIDATION_ERROR_RESPONSE,
)
def list_products(
    page: str | None = Query(default=None, description="Page number (1..1000)", examples=["1"]),
    limit: str | None = Query(default=None, description="Page size (1..100)", examples=["10"]),
    q: str | None = Query(default=None, description="Search term", examples=["chip"]),
    use_case: ListProducts = Depends(get_list_products_use_case),
) -> ProductListResponseDTO:
    """List products endpoint following parse → execute → map → return pattern."""
    request = ListProductsRequest(page=page, limit=limit, query=q)
    result = use_case.execute(request).unwrap()
    return ProductMapper.to_list_response(result)


@router.get(
    "/products/bulk",
    response_model=ProductBulkResponseDTO,
    summary="Get several products by ID",
    description="""
    Fetch up to 20 products in one call. Every id must exist.

    Products are returned in catalog order, not request order.

    ## Example
    ```
    GET /api/products/bulk?ids=1,3,5
    ```
    """,
    responses={
        **VALIDATION_ERROR_RESPONSE,
        404: {"model": ErrorResponse, "description": "Some products not found"},
    },
)
def get_bulk_products(
    ids: str | None = Query(default=None, description="Comma-separated ids", examples=["1,2,3"]),
    use_case: GetProductsByIds = Depends(get_get_products_by_ids_use_case),
) -> ProductBulkResponseDTO:
    result = use_case.execute(GetProductsByIdsRequest(ids=ids)).unwrap()
    return ProductMapper.to_bulk_response(result)


@router.get(
    "/products/stats",
    response_model=ProductStatsResponseDTO,
    summary="Catalog statistics",
    description="""
    Averages and ranges over the whole catalog, plus category, price segment
    and rating distribution breakdowns.
    """,
    responses={500: {"model": ErrorResponse, "description": "Statistics unavailable"}},
)
def get_product_stats(
    use_case: GetProductStats = Depends(get_product_stats_use_case),
) -> ProductStatsResponseDTO:
    report = use_case.execute().unwrap()
    return ProductMapper.to_stats_response(report)


@router.get(
    "/products/search/price",
    response_model=PriceFilterResponseDTO,
    summary="Filter products by price range",
    description="""
    Inclusive price range filter.

    - minPrice: default 0
    - maxPrice: default unbounded (max 1,000,000 when given)
    """,
    responses=VALIDATION_ERROR_RESPONSE,
)
def filter_by_price(
    min_price: str | None = Query(default=None, alias="minPrice", examples=["300"]),
    max_price: str | None = Query(default=None, alias="maxPrice", examples=["1000"]),
    use_case: FilterProductsByPrice = Depends(get_filter_by_price_use_case),
) -> PriceFilterResponseDTO:
    request = FilterProductsByPriceRequest(min_price=min_price, max_price=max_price)
    result = use_case.execute(request).unwrap()
    return ProductMapper.to_price_filter_response(result)


@router.get(
    "/products/search/rating",
    response_model=RatingFilterResponseDTO,
    summary="Filter products by minimum rating",
    description="Returns products rated at or above minRating (0..5, default 0).",
    responses=VALIDATION_ERROR_RESPONSE,
)
def filter_by_rating(
    min_rating: str | None = Query(default=None, alias="minRating", examples=["4.5"]),
    use_case: FilterProductsByRating = Depends(get_filter_by_rating_use_case),
) -> RatingFilterResponseDTO:
    result = use_case.execute(FilterProductsByRatingRequest(min_rating=min_rating)).unwrap()
    return ProductMapper.to_rating_filter_response(result)


@router.get(
    "/products/search/specs",
    response_model=SpecificationSearchResponseDTO,
    summary="Search products by specification",
    description="Case-insensitive match on specification values (1..200 chars).",
    responses=VALIDATION_ERROR_RESPONSE,
)
def search_by_specification(
    spec: str | None = Query(default=None, examples=["Apple M2"]),
    use_case: SearchProductsBySpecification = Depends(get_search_by_specification_use_case),
) -> SpecificationSearchResponseDTO:
    result = use_case.execute(SearchProductsBySpecificationRequest(spec=spec)).unwrap()
    return ProductMapper.to_specification_search_response(result)


@router.get(
    "/products/{product_id}",
    response_model=ProductDetailResponseDTO,
    summary="Get a product by ID",
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
)
def get_product(
    product_id: str,
    use_case: GetProductById = Depends(get_get_product_by_id_use_case),
) -> ProductDetailResponseDTO:
    result = use_case.execute(GetProductByIdRequest(product_id=product_id)).unwrap()
    return ProductMapper.to_detail_response(result)
