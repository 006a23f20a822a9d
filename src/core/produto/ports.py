"""
Ports (Interfaces) do Domínio de Produtos.

Define o contrato que os Adapters de infraestrutura devem implementar
para persistência e consulta de produtos.

Example:
    # No Adapter (Django)
    class DjangoProdutoRepository(DjangoCrudRepository[Produto, ProdutoModel]):
        model_class = ProdutoModel
"""

from itertools import count as counter
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from src.core.shared.dtos import PaginatedResult, PaginationParams, SortParams
from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.interfaces import CrudBaseRepository

from .entities import Produto


@runtime_checkable
class ProdutoRepository(CrudBaseRepository[Produto, int], Protocol):
    """
    Interface para persistência de Produtos.

    Implementações:
    - DjangoProdutoRepository (Django ORM)
    - InMemoryProdutoRepository (para testes)
    """


class InMemoryProdutoRepository:
    """
    Implementação em memória do ProdutoRepository.

    Gera ids sequenciais a partir de 1, como uma coluna
    auto-incremento. Save com id só atualiza produto existente.

    Útil para:
    - Testes unitários
    - Prototipagem

    Não usar em produção!
    """

    def __init__(self):
        self._produtos: Dict[int, Produto] = {}
        self._sequence = counter(1)

    def save(self, produto: Produto) -> Produto:
        """Salva cópia do produto, gerando id se necessário."""
        if produto.id is None:
            produto_id = next(self._sequence)
        elif produto.id in self._produtos:
            produto_id = produto.id
        else:
            raise self._not_found(produto.id)

        stored = Produto(id=produto_id, descricao=produto.descricao)
        self._produtos[produto_id] = stored
        return Produto(id=stored.id, descricao=stored.descricao)

    def delete_by_id(self, produto_id: int) -> None:
        if produto_id not in self._produtos:
            raise self._not_found(produto_id)
        del self._produtos[produto_id]

    def find_by_id(self, produto_id: int) -> Optional[Produto]:
        stored = self._produtos.get(produto_id)
        if stored is None:
            return None
        return Produto(id=stored.id, descricao=stored.descricao)

    def find_all(self) -> List[Produto]:
        return [self.find_by_id(key) for key in sorted(self._produtos)]

    def exists(self, produto_id: int) -> bool:
        return produto_id in self._produtos

    def count(self) -> int:
        return len(self._produtos)

    def search(
        self,
        pagination: Optional[PaginationParams] = None,
        sort: Optional[SortParams] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> PaginatedResult[Produto]:
        """Busca com filtros de igualdade (lista = "em lista")."""
        pagination = pagination or PaginationParams()
        sort = sort or SortParams()

        items = self.find_all()
        for key, value in (filters or {}).items():
            if value is None:
                continue
            if isinstance(value, list):
                items = [p for p in items if getattr(p, key) in value]
            else:
                items = [p for p in items if getattr(p, key) == value]

        items.sort(key=lambda p: getattr(p, sort.field), reverse=sort.descending)

        return PaginatedResult(
            items=items[pagination.offset:pagination.offset + pagination.per_page],
            total=len(items),
            page=pagination.page,
            per_page=pagination.per_page,
        )

    @staticmethod
    def _not_found(produto_id: int) -> EntityNotFoundError:
        return EntityNotFoundError(
            f"Produto {produto_id} não encontrado",
            entity_type="Produto",
            entity_id=produto_id,
        )
