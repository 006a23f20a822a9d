"""
Configuração pytest para testes com Django.

Este arquivo configura:
- Django settings mínimas para testes (SQLite em memória)
- Fixtures compartilhadas dos adapters
"""

import pytest


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'src.adapters.django_app.produto',
            ],
            DEFAULT_AUTO_FIELD='django.db.models.AutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
        )
        django.setup()


@pytest.fixture
def produto_model_factory():
    """Factory para criar ProdutoModel direto no banco."""
    from src.adapters.django_app.produto.models import ProdutoModel

    def create_produto(**kwargs):
        defaults = {'descricao': 'Produto de Teste'}
        defaults.update(kwargs)
        return ProdutoModel.objects.create(**defaults)

    return create_produto


@pytest.fixture
def django_produto_repo():
    from src.adapters.django_app.produto.repositories import DjangoProdutoRepository
    return DjangoProdutoRepository()


@pytest.fixture
def django_uow():
    from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
    return DjangoUnitOfWork()


@pytest.fixture
def produto_service(django_produto_repo, django_uow):
    from src.core.produto.use_cases import ProdutoService
    return ProdutoService(django_produto_repo, django_uow)
