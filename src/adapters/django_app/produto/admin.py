"""
Django Admin para o domínio de Produtos.
"""

from django.contrib import admin

from .models import ProdutoModel


@admin.register(ProdutoModel)
class ProdutoAdmin(admin.ModelAdmin):
    """Admin para ProdutoModel."""

    list_display = ['id', 'descricao']
    search_fields = ['descricao']
    ordering = ['id']
    list_per_page = 50
