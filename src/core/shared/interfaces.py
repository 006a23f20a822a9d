"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as abstrações que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Contratos:
- Model: marcador de entidade identificável
- SearchBaseRepository: consultas (somente leitura)
- CrudBaseRepository: consultas + save/delete_by_id
- UnitOfWork: escopo transacional (begin/commit/rollback)

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Hashable, List, Optional, Protocol, TypeVar

from .dtos import PaginatedResult, PaginationParams, SortParams


# Tipo do identificador (int, str, UUID...)
ID = TypeVar("ID", bound=Hashable)


class Model(Generic[ID]):
    """
    Marcador para entidades identificáveis.

    Toda entidade possui um identificador único `id`. Enquanto
    `id` for None a entidade ainda não foi persistida; o valor
    é gerado pela camada de armazenamento no primeiro insert.

    A unicidade do id é garantida pelo armazenamento, não aqui.

    Example:
        @dataclass
        class Produto(Model[int]):
            id: Optional[int] = None
            descricao: str = ""
    """

    id: Optional[ID]

    @property
    def is_new(self) -> bool:
        """True enquanto a entidade não recebeu id do armazenamento."""
        return self.id is None


M = TypeVar("M", bound=Model)


class SearchBaseRepository(Protocol[M, ID]):
    """
    Interface de consulta para repositórios.

    Type Parameters:
        M: Tipo da entidade gerenciada
        ID: Tipo do identificador

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
    """

    def find_by_id(self, entity_id: ID) -> Optional[M]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None
        """
        ...

    def find_all(self) -> List[M]:
        """Lista todas as entidades na ordenação padrão."""
        ...

    def exists(self, entity_id: ID) -> bool:
        ...

    def count(self) -> int:
        ...

    def search(
        self,
        pagination: Optional[PaginationParams] = None,
        sort: Optional[SortParams] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> PaginatedResult[M]:
        """
        Lista entidades com paginação, ordenação e filtros.

        Filtros são um dict campo -> valor. Valor lista significa
        "campo em lista"; valores None são ignorados.
        """
        ...


class CrudBaseRepository(SearchBaseRepository[M, ID], Protocol):
    """
    Interface base para repositórios CRUD.

    Acrescenta as operações de escrita às consultas de
    SearchBaseRepository.
    """

    def save(self, entity: M) -> M:
        """
        Persiste entidade (create ou update).

        Se entity.id é None, cria e o armazenamento gera o id.
        Caso contrário, atualiza a entidade existente com esse id;
        nunca cria registro com id escolhido pelo chamador.

        Returns:
            Entidade persistida, com id preenchido

        Raises:
            EntityNotFoundError: Se o id informado não existe
        """
        ...

    def delete_by_id(self, entity_id: ID) -> None:
        """
        Remove entidade por ID.

        Raises:
            EntityNotFoundError: Se não existe entidade com o ID
        """
        ...


class UnitOfWork(ABC):
    """
    Unit of Work - Escopo transacional explícito.

    Pattern: Context Manager
        with uow:
            repo.save(entity1)
            repo.save(entity2)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    A mesma instância pode ser reutilizada em blocos `with`
    sequenciais. Implementações podem suportar aninhamento.

    Example:
        class DjangoUnitOfWork(UnitOfWork):
            def commit(self):
                ...
    """

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persiste as mudanças da transação corrente."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz as mudanças da transação corrente.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError

