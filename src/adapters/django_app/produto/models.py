"""
Django Models para o domínio de Produtos.

Estes models são ADAPTERS - implementam a persistência para a
entidade de domínio definida em src/core/produto/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Models são mapeados para/de Entities via Mappers
"""

from django.db import models


class ProdutoModel(models.Model):
    """
    Model Django para persistência de Produtos.

    Fields:
        id: Chave inteira gerada pelo banco (auto-incremento)
        descricao: Texto livre
    """

    id = models.AutoField(primary_key=True)

    descricao = models.TextField(
        blank=True,
        default='',
        help_text="Descrição do produto"
    )

    class Meta:
        db_table = 'produto'
        verbose_name = 'Produto'
        verbose_name_plural = 'Produtos'
        ordering = ['id']

    def __str__(self):
        return f"[{self.id}] {self.descricao[:50]}"

    def __repr__(self):
        return f"<ProdutoModel id={self.id}>"
