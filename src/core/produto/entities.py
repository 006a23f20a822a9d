"""
Entidades do Domínio de Produtos.

Entidades:
- Produto: id inteiro gerado pelo armazenamento + descrição livre

Nenhuma restrição é aplicada à descrição nesta camada; regras
adicionais entram como hooks em ProdutoService.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared.interfaces import Model


@dataclass
class Produto(Model[int]):
    """
    Entidade de Domínio: Produto.

    Ciclo de vida:
    - Criado em memória pelo chamador (id None)
    - Recebe id no primeiro insert bem-sucedido
    - Alterado via update, removido via delete

    Attributes:
        id: Chave substituta, gerada no insert
        descricao: Texto livre

    Example:
        produto = Produto.criar(descricao="Caneta azul")
        produto = service.insert(produto)
        print(produto.id)
    """

    id: Optional[int] = None
    descricao: str = ""

    @classmethod
    def criar(cls, descricao: str) -> "Produto":
        """Factory para novo produto, ainda não persistido."""
        return cls(id=None, descricao=descricao)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "descricao": self.descricao,
        }
