"""
Repositórios Django para persistência de Produtos.

Implementam a interface ProdutoRepository definida no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Toda a mecânica CRUD vem de DjangoCrudRepository; aqui ficam
apenas o model e o mapper do domínio.
"""

from src.core.produto.entities import Produto

from ..shared.repository import DjangoCrudRepository
from .mappers import ProdutoMapper
from .models import ProdutoModel


class DjangoProdutoRepository(DjangoCrudRepository[Produto, ProdutoModel]):
    """
    Implementação Django do ProdutoRepository.

    Example:
        repo = DjangoProdutoRepository()

        produto = repo.save(Produto(descricao="Caneta"))
        repo.find_by_id(produto.id)
        repo.search(filters={"descricao__icontains": "can"})
        repo.delete_by_id(produto.id)
    """

    model_class = ProdutoModel
    default_order_field = 'id'

    def to_entity(self, model: ProdutoModel) -> Produto:
        return ProdutoMapper.to_entity(model)

    def to_model(self, entity: Produto) -> ProdutoModel:
        return ProdutoMapper.to_model(entity)
