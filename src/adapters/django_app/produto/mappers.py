"""
Mappers para conversão entre Entities (Core) e Models (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Evitam vazamento de detalhes do ORM para o Core
"""

from typing import Iterable, List

from src.core.produto.entities import Produto

from .models import ProdutoModel


class ProdutoMapper:
    """
    Mapper para conversão entre Produto e ProdutoModel.

    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - to_entity_list(): Models → Entities
    """

    @staticmethod
    def to_model(entity: Produto) -> ProdutoModel:
        """
        Converte Produto para ProdutoModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return ProdutoModel(
            id=entity.id,
            descricao=entity.descricao,
        )

    @staticmethod
    def to_entity(model: ProdutoModel) -> Produto:
        return Produto(
            id=model.id,
            descricao=model.descricao,
        )

    @classmethod
    def to_entity_list(cls, models: Iterable[ProdutoModel]) -> List[Produto]:
        return [cls.to_entity(m) for m in models]
