"""
Repository Base - Implementação base de repositórios com Django ORM.

Implementa o contrato CrudBaseRepository do Core para qualquer
par Entity/Model:
- save (insert com id gerado ou update de linha existente)
- delete_by_id (falha se o id não existe)
- consultas: find_by_id, find_all, exists, count
- search com paginação, ordenação e filtros

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Não abrem transação: isso é papel do Unit of Work
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import logging

from django.db import models
from django.db.models import QuerySet

from src.core.shared.dtos import PaginatedResult, PaginationParams, SortParams
from src.core.shared.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class DjangoCrudRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios CRUD Django.

    Subclasses definem `model_class` e os mapeamentos
    Entity <-> Model.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoProdutoRepository(DjangoCrudRepository[Produto, ProdutoModel]):
            model_class = ProdutoModel

            def to_entity(self, model):
                return ProdutoMapper.to_entity(model)

            def to_model(self, entity):
                return ProdutoMapper.to_model(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Campo padrão de ordenação
    default_order_field: str = "pk"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Converte Model Django para Entity de domínio."""
        raise NotImplementedError

    @abstractmethod
    def to_model(self, entity: T) -> M:
        """Converte Entity de domínio para Model Django (não salvo)."""
        raise NotImplementedError

    @property
    def entity_name(self) -> str:
        return self.model_class.__name__.replace("Model", "")

    def _get_base_queryset(self) -> QuerySet:
        return self.model_class.objects.all()

    # =========================================================================
    # Escrita
    # =========================================================================

    def save(self, entity: T) -> T:
        """
        Persiste entidade (create ou update).

        Sem id: INSERT e o banco gera a chave.
        Com id: UPDATE da linha existente; nunca insere com id
        escolhido pelo chamador.

        Returns:
            Entidade persistida, com id preenchido

        Raises:
            EntityNotFoundError: Se o id informado não existe
        """
        model = self.to_model(entity)
        entity_id = getattr(entity, "id")

        if entity_id is None:
            model.save(force_insert=True)
            logger.debug(f"{self.entity_name} created: {model.pk}")
        else:
            values = {
                field.attname: getattr(model, field.attname)
                for field in model._meta.concrete_fields
                if not field.primary_key
            }
            updated = self.model_class.objects.filter(pk=entity_id).update(**values)

            if updated == 0:
                raise EntityNotFoundError(
                    f"{self.entity_name} {entity_id} não encontrado",
                    entity_type=self.entity_name,
                    entity_id=entity_id,
                )

            model.pk = entity_id
            logger.debug(f"{self.entity_name} updated: {entity_id}")

        return self.to_entity(model)

    def delete_by_id(self, entity_id: Any) -> None:
        """
        Remove entidade por ID.

        Raises:
            EntityNotFoundError: Se nenhuma linha foi removida
        """
        deleted_count, _ = self.model_class.objects.filter(pk=entity_id).delete()

        if deleted_count == 0:
            raise EntityNotFoundError(
                f"{self.entity_name} {entity_id} não encontrado",
                entity_type=self.entity_name,
                entity_id=entity_id,
            )

        logger.debug(f"{self.entity_name} deleted: {entity_id}")

    # =========================================================================
    # Consulta
    # =========================================================================

    def find_by_id(self, entity_id: Any) -> Optional[T]:
        try:
            model = self._get_base_queryset().get(pk=entity_id)
            return self.to_entity(model)
        except self.model_class.DoesNotExist:
            return None

    def find_all(self) -> List[T]:
        """
        Lista todas as entidades.

        Warning:
            Sem paginação! Prefira search() em produção.
        """
        qs = self._get_base_queryset().order_by(self.default_order_field)
        return [self.to_entity(m) for m in qs]

    def exists(self, entity_id: Any) -> bool:
        return self.model_class.objects.filter(pk=entity_id).exists()

    def count(self) -> int:
        return self.model_class.objects.count()

    def search(
        self,
        pagination: Optional[PaginationParams] = None,
        sort: Optional[SortParams] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> PaginatedResult[T]:
        """
        Lista entidades com paginação e filtros.

        Args:
            pagination: Parâmetros de paginação (default: página 1)
            sort: Parâmetros de ordenação (opcional)
            filters: Filtros como dict (opcional); aceita lookups
                do ORM na chave, ex: {"descricao__icontains": "caneta"}

        Returns:
            Resultado paginado
        """
        pagination = pagination or PaginationParams()
        qs = self._get_base_queryset()

        if filters:
            qs = self._apply_filters(qs, filters)

        order_by = sort.order_by if sort else self.default_order_field
        qs = qs.order_by(order_by)

        total = qs.count()

        rows = qs[pagination.offset:pagination.offset + pagination.per_page]

        return PaginatedResult(
            items=[self.to_entity(m) for m in rows],
            total=total,
            page=pagination.page,
            per_page=pagination.per_page,
        )

    def _apply_filters(self, qs: QuerySet, filters: Dict[str, Any]) -> QuerySet:
        """
        Aplica filtros ao queryset.

        - valor None: ignorado
        - valor lista: vira lookup __in
        - demais: igualdade (ou o lookup já presente na chave)
        """
        for key, value in filters.items():
            if value is None:
                continue

            if isinstance(value, list):
                qs = qs.filter(**{f"{key}__in": value})
            else:
                qs = qs.filter(**{key: value})

        return qs
