from typing import Any, Dict, List, Optional, Tuple

Product = Dict[str, Any]


class ProductQueryParams:
    """Filter, sort and pagination options for listing products."""

    def __init__(self, page: Optional[int] = None, limit: Optional[int] = None, search: Optional[str] = None,
                 manufacturer: Optional[str] = None, sort_by: Optional[str] = None,
                 sort_order: Optional[str] = None) -> None:
        self.page: Optional[int] = page
        self.limit: Optional[int] = limit
        self.search: Optional[str] = search
        self.manufacturer: Optional[str] = manufacturer
        self.sort_by: Optional[str] = sort_by
        self.sort_order: Optional[str] = sort_order

    def to_query(self) -> List[Tuple[str, str]]:
        """Return the query pairs to send, skipping every falsy value.

        A page or limit of 0 is dropped along with absent values.
        """
        pairs = [
            ('page', self.page),
            ('limit', self.limit),
            ('search', self.search),
            ('manufacturer', self.manufacturer),
            ('sortBy', self.sort_by),
            ('sortOrder', self.sort_order),
        ]
        return [(key, str(value)) for key, value in pairs if value]


class ProductResponse:
    """A page of products as returned by the list endpoint.

    The decoded envelope is kept as-is in ``raw``; nothing is filled in or checked.
    """

    def __init__(self, products: List[Product], total: int, page: int, total_pages: int,
                 raw: Optional[Dict[str, Any]] = None) -> None:
        self.products: List[Product] = products
        self.total: int = total
        self.page: int = page
        self.total_pages: int = total_pages
        self.raw: Optional[Dict[str, Any]] = raw

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductResponse":
        return cls(
            products=data.get('products'),
            total=data.get('total'),
            page=data.get('page'),
            total_pages=data.get('totalPages'),
            raw=data,
        )

    def to_dict(self) -> dict:
        """Return the envelope in its wire shape, unknown keys included."""
        if self.raw is not None:
            return dict(self.raw)
        return {
            'products': self.products,
            'total': self.total,
            'page': self.page,
            'totalPages': self.total_pages,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductResponse):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"ProductResponse(total={self.total}, page={self.page}, "
                f"total_pages={self.total_pages}, products={len(self.products or [])})")
