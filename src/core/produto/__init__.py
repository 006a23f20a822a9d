"""
Domínio de Produtos.

Contém:
- Entidade Produto
- Ports (ProdutoRepository, InMemoryProdutoRepository)
- Use Case ProdutoService (CRUD)
"""

from .entities import Produto
from .ports import ProdutoRepository, InMemoryProdutoRepository
from .use_cases import ProdutoService

__all__ = [
    "Produto",
    "ProdutoRepository",
    "InMemoryProdutoRepository",
    "ProdutoService",
]
