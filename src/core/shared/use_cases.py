"""
Services genéricos de consulta e CRUD.

Todo service CRUD da aplicação DEVE estender CrudService.

Fluxo das operações de escrita:
    insert: pre_insert → validate_insert → repository.save
    update: pre_update → validate_update → repository.save
    delete: validate_delete → pre_delete → repository.delete_by_id

Cada operação unitária roda em sua própria transação (`with uow:`).
Qualquer hook pode lançar BusinessException para abortar antes
da persistência; a transação é revertida e a exceção propagada.
"""

from abc import ABC
import copy
from typing import Any, Dict, Generic, Iterable, List, Optional
import logging

from .dtos import PaginatedResult, PaginationParams, SortParams
from .exceptions import BusinessException, EntityNotFoundError
from .interfaces import ID, M, CrudBaseRepository, SearchBaseRepository, UnitOfWork

logger = logging.getLogger(__name__)


class SearchService(ABC, Generic[M, ID]):
    """
    API comum de consulta.

    Operações de leitura não abrem transação.

    Attributes:
        repository: Repositório de consulta
    """

    def __init__(self, repository: SearchBaseRepository[M, ID]):
        self.repository = repository

    @property
    def entity_name(self) -> str:
        """Nome usado em mensagens de erro e logs."""
        return self.__class__.__name__.replace("Service", "") or "Entidade"

    def find_by_id(self, entity_id: ID) -> Optional[M]:
        return self.repository.find_by_id(entity_id)

    def get_by_id(self, entity_id: ID) -> M:
        """
        Busca entidade obrigatória por ID.

        Raises:
            EntityNotFoundError: Se não existe
        """
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(
                f"{self.entity_name} {entity_id} não encontrado",
                entity_type=self.entity_name,
                entity_id=entity_id,
            )
        return entity

    def find_all(self) -> List[M]:
        return self.repository.find_all()

    def exists(self, entity_id: ID) -> bool:
        return self.repository.exists(entity_id)

    def count(self) -> int:
        return self.repository.count()

    def search(
        self,
        pagination: Optional[PaginationParams] = None,
        sort: Optional[SortParams] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> PaginatedResult[M]:
        return self.repository.search(
            pagination=pagination,
            sort=sort,
            filters=filters,
        )


class CrudService(SearchService[M, ID]):
    """
    API comum para todos os services CRUD.

    Fornece validações, inserção, atualização e remoção, com
    hooks sobrescrevíveis antes de cada operação.

    Attributes:
        repository: Repositório CRUD
        uow: Unit of Work que delimita cada operação

    Example:
        class ProdutoService(CrudService[Produto, int]):
            def validate_insert(self, model):
                if not model.descricao:
                    raise BusinessException("Descrição obrigatória")

        service = ProdutoService(repository, uow)
        produto = service.insert(Produto(descricao="Caneta"))
    """

    def __init__(self, repository: CrudBaseRepository[M, ID], uow: UnitOfWork):
        """
        Inicializa service com dependências injetadas.

        Args:
            repository: Repositório para persistência
            uow: Unit of Work para transação de cada operação
        """
        super().__init__(repository)
        self.uow = uow

    # =========================================================================
    # Insert
    # =========================================================================

    def pre_insert(self, model: M) -> M:
        """Execução antes da inserção. Retorna o model a inserir."""
        return model

    def validate_insert(self, model: M) -> None:
        """
        Valida a inserção antes de executá-la.

        Raises:
            BusinessException: Se alguma regra não é aceita
        """

    def insert(self, model: M) -> M:
        """
        Insere o model.

        Returns:
            Model persistido, com o id gerado pelo armazenamento

        Raises:
            BusinessException: Se alguma regra não é aceita
        """
        with self.uow:
            model = self.pre_insert(model)
            self._guard(self.validate_insert, model)
            saved = self.repository.save(model)

        logger.info(f"{self.entity_name} inserido: {saved.id}")
        return saved

    # =========================================================================
    # Update
    # =========================================================================

    def pre_update(self, model: M) -> M:
        """Execução antes da atualização. Retorna o model a salvar."""
        return model

    def validate_update(self, model: M) -> None:
        """
        Valida a atualização antes de executá-la.

        Raises:
            BusinessException: Se alguma regra não é aceita
        """

    def update(self, entity_id: ID, model: M) -> None:
        """
        Atualiza o model identificado por `entity_id`.

        O parâmetro `entity_id` prevalece: é atribuído a uma cópia do
        model, que segue para os hooks; o objeto do chamador não é
        alterado. Um id divergente no model aborta a operação.

        Raises:
            BusinessException: Se o id diverge ou alguma regra não é aceita
            EntityNotFoundError: Se não existe entidade com o id
        """
        with self.uow:
            model = self._bind_id(entity_id, model)
            model = self.pre_update(model)
            self._guard(self.validate_update, model)
            self.repository.save(model)

        logger.info(f"{self.entity_name} atualizado: {entity_id}")

    def _bind_id(self, entity_id: ID, model: M) -> M:
        if model.id is not None and model.id != entity_id:
            logger.warning(
                f"{self.entity_name}: id {model.id} diverge do parâmetro {entity_id}"
            )
            raise BusinessException(
                f"ID do {self.entity_name} ({model.id}) diverge do ID informado ({entity_id})",
                rule="ID_DIVERGENTE",
            )
        bound = copy.copy(model)
        bound.id = entity_id
        return bound

    # =========================================================================
    # Delete
    # =========================================================================

    def pre_delete(self, entity_id: ID) -> None:
        """Execução antes da remoção."""

    def validate_delete(self, entity_id: ID) -> None:
        """
        Valida a remoção antes de executá-la.

        Raises:
            BusinessException: Se alguma regra não é aceita
        """

    def delete(self, entity_id: ID) -> None:
        """
        Remove o model.

        A validação roda ANTES do pre_delete.

        Raises:
            BusinessException: Se alguma regra não é aceita
            EntityNotFoundError: Se o repositório não encontra o id
        """
        with self.uow:
            self._guard(self.validate_delete, entity_id)
            self.pre_delete(entity_id)
            self.repository.delete_by_id(entity_id)

        logger.info(f"{self.entity_name} removido: {entity_id}")

    def delete_many(self, ids: Iterable[ID]) -> None:
        """
        Remove todos os IDs, em ordem.

        Não é atômico como lote: cada id tem sua própria transação.
        Uma falha interrompe o laço; remoções anteriores permanecem.

        Raises:
            BusinessException: Se alguma regra não é aceita
        """
        for entity_id in ids:
            self.delete(entity_id)

    def _guard(self, validator, arg) -> None:
        try:
            validator(arg)
        except BusinessException as e:
            logger.warning(f"{self.entity_name}: regra violada em {validator.__name__}: {e}")
            raise
