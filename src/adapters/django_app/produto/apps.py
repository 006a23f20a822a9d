"""
Configuração do Django App para Produtos.
"""

from django.apps import AppConfig


class ProdutoConfig(AppConfig):
    """Configuração do app Produto."""

    default_auto_field = 'django.db.models.AutoField'
    name = 'src.adapters.django_app.produto'
    label = 'produto'
    verbose_name = 'Cadastro de Produtos'
