"""
DTOs compartilhados para buscas paginadas.

Usados pelos contratos de repositório (SearchBaseRepository) e pelo
SearchService, independentes de qualquer ORM.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationParams:
    """Parâmetros de paginação."""
    page: int = 1
    per_page: int = 20

    @property
    def offset(self) -> int:
        """Calcula offset para query."""
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class SortParams:
    """Parâmetros de ordenação."""
    field: str = "id"
    direction: str = "asc"  # asc ou desc

    @property
    def descending(self) -> bool:
        return self.direction == "desc"

    @property
    def order_by(self) -> str:
        """Retorna string para QuerySet.order_by()."""
        prefix = "-" if self.descending else ""
        return f"{prefix}{self.field}"


@dataclass
class PaginatedResult(Generic[T]):
    """Resultado paginado."""
    items: List[T]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        """Calcula total de páginas."""
        return (self.total + self.per_page - 1) // self.per_page

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dict."""
        return {
            "items": [
                item.to_dict() if hasattr(item, "to_dict") else item
                for item in self.items
            ],
            "total": self.total,
            "page": self.page,
            "per_page": self.per_page,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }
