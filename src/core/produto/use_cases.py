"""
Use Cases (Application Services) do Domínio de Produtos.

ProdutoService herda todo o fluxo de CrudService
(hooks, validações e transação por operação) sem regras extras.
"""

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.use_cases import CrudService

from .entities import Produto
from .ports import ProdutoRepository


class ProdutoService(CrudService[Produto, int]):
    """
    Service CRUD de Produtos.

    Example:
        service = ProdutoService(produto_repo, uow)
        produto = service.insert(Produto.criar("Caneta azul"))
        service.update(produto.id, Produto(descricao="Caneta preta"))
        service.delete(produto.id)
    """

    def __init__(self, produto_repo: ProdutoRepository, uow: UnitOfWork):
        super().__init__(produto_repo, uow)
