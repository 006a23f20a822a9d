"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports): Model, repositórios, UnitOfWork
- Services base: SearchService, CrudService
"""

from .exceptions import (
    DomainException,
    BusinessException,
    EntityNotFoundError,
)
from .dtos import PaginationParams, SortParams, PaginatedResult
from .interfaces import (
    Model,
    SearchBaseRepository,
    CrudBaseRepository,
    UnitOfWork,
)
from .use_cases import SearchService, CrudService

__all__ = [
    "DomainException",
    "BusinessException",
    "EntityNotFoundError",
    "PaginationParams",
    "SortParams",
    "PaginatedResult",
    "Model",
    "SearchBaseRepository",
    "CrudBaseRepository",
    "UnitOfWork",
    "SearchService",
    "CrudService",
]
