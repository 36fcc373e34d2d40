from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float
    description: str
    image_url: str
    rating: float
    specs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy, so products shared across requests cannot be mutated
        object.__setattr__(self, "specs", MappingProxyType(dict(self.specs)))


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    limit: int = 10


@dataclass(frozen=True, slots=True)
class PriceRange:
    min: float = 0.0
    max: float = math.inf


@dataclass(frozen=True, slots=True)
class ValueRange:
    min: float = 0.0
    max: float = 0.0


@dataclass(frozen=True, slots=True)
class PaginationMeta:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class PageResult:
    """A page of products plus pagination metadata."""

    products: list[Product]
    pagination: PaginationMeta
