"""
Django App de Produtos.

Adapter de persistência do domínio src.core.produto.
"""
