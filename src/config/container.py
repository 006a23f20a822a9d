"""
Dependency Injection Container.

Configura e gerencia as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories)
- Factory: Nova instância por chamada (services, UoW)

Imports dos adapters Django são tardios: o container pode ser
importado antes de django.setup().
"""

from dependency_injector import containers, providers
from typing import Optional


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Example:
        from src.config.container import get_container

        service = get_container().produto_service()
        produto = service.insert(Produto.criar("Caneta"))
    """

    config = providers.Configuration()

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    produto_repository = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.produto.repositories',
            fromlist=['DjangoProdutoRepository']
        ).DjangoProdutoRepository()
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por service)
    # =========================================================================

    unit_of_work = providers.Factory(
        lambda using: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['DjangoUnitOfWork']
        ).DjangoUnitOfWork(using=using or 'default'),
        using=config.database_alias,
    )

    # =========================================================================
    # Services (Factory - nova instância por chamada)
    # =========================================================================

    produto_service = providers.Factory(
        lambda produto_repo, uow: __import__(
            'src.core.produto.use_cases',
            fromlist=['ProdutoService']
        ).ProdutoService(
            produto_repo=produto_repo,
            uow=uow,
        ),
        produto_repo=produto_repository,
        uow=unit_of_work,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes, sem banco de dados.

    Example:
        container = TestingContainer()
        service = container.produto_service()
    """

    config = providers.Configuration()

    produto_repository = providers.Singleton(
        lambda: __import__(
            'src.core.produto.ports',
            fromlist=['InMemoryProdutoRepository']
        ).InMemoryProdutoRepository()
    )

    unit_of_work = providers.Factory(
        lambda: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['InMemoryUnitOfWork']
        ).InMemoryUnitOfWork()
    )

    produto_service = providers.Factory(
        lambda produto_repo, uow: __import__(
            'src.core.produto.use_cases',
            fromlist=['ProdutoService']
        ).ProdutoService(
            produto_repo=produto_repo,
            uow=uow,
        ),
        produto_repo=produto_repository,
        uow=unit_of_work,
    )
