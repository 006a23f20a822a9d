"""
Testes Unitários para CrudService e SearchService.

Estratégia de Teste:
- RecordingRepository (fake) registra cada chamada em um log comum
- RecordingService sobrescreve todos os hooks e registra a ordem
- FakeUnitOfWork registra begin/commit/rollback no mesmo log

Coverage:
- Ordem hooks → validação → persistência (insert, update, delete)
- Abort por BusinessException antes da persistência
- delete_many sequencial e não atômico
- Decisão sobre id divergente no update
- Consultas do SearchService
"""

import pytest
from dataclasses import dataclass
from typing import List, Optional

from src.core.shared.dtos import PaginatedResult, PaginationParams
from src.core.shared.exceptions import BusinessException, EntityNotFoundError
from src.core.shared.interfaces import Model
from src.core.shared.use_cases import CrudService


@dataclass
class Item(Model[int]):
    id: Optional[int] = None
    nome: str = ""


class FakeUnitOfWork:
    """Fake Unit of Work que registra o ciclo da transação."""

    def __init__(self, log: List[str]):
        self.log = log

    def __enter__(self):
        self.log.append("begin")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.log.append("rollback")
        else:
            self.log.append("commit")
        return False


class RecordingRepository:
    """Repositório fake: gera ids e registra save/delete_by_id."""

    def __init__(self, log: List[str]):
        self.log = log
        self.items = {}
        self.fail_on_delete = set()
        self._next_id = 100

    def save(self, item: Item) -> Item:
        self.log.append(f"save:{item.id}")
        if item.id is None:
            item = Item(id=self._next_id, nome=item.nome)
            self._next_id += 1
        self.items[item.id] = item
        return item

    def delete_by_id(self, item_id: int) -> None:
        self.log.append(f"delete_by_id:{item_id}")
        if item_id in self.fail_on_delete or item_id not in self.items:
            raise EntityNotFoundError(f"Item {item_id} não encontrado")
        del self.items[item_id]

    def find_by_id(self, item_id: int) -> Optional[Item]:
        return self.items.get(item_id)

    def find_all(self) -> List[Item]:
        return list(self.items.values())

    def exists(self, item_id: int) -> bool:
        return item_id in self.items

    def count(self) -> int:
        return len(self.items)

    def search(self, pagination=None, sort=None, filters=None):
        pagination = pagination or PaginationParams()
        items = self.find_all()
        return PaginatedResult(
            items=items,
            total=len(items),
            page=pagination.page,
            per_page=pagination.per_page,
        )


class RecordingService(CrudService[Item, int]):
    """Service com todos os hooks registrando a ordem de chamada."""

    def __init__(self, repository, uow, log):
        super().__init__(repository, uow)
        self.log = log
        self.reject = set()

    def _maybe_reject(self, hook: str):
        if hook in self.reject:
            raise BusinessException(f"rejeitado em {hook}", rule=hook.upper())

    def pre_insert(self, model):
        self.log.append("pre_insert")
        model.nome = model.nome.strip()
        return model

    def validate_insert(self, model):
        self.log.append("validate_insert")
        self._maybe_reject("validate_insert")

    def pre_update(self, model):
        self.log.append("pre_update")
        return model

    def validate_update(self, model):
        self.log.append("validate_update")
        self._maybe_reject("validate_update")

    def pre_delete(self, entity_id):
        self.log.append(f"pre_delete:{entity_id}")

    def validate_delete(self, entity_id):
        self.log.append(f"validate_delete:{entity_id}")
        self._maybe_reject("validate_delete")


@pytest.fixture
def log():
    return []


@pytest.fixture
def repo(log):
    return RecordingRepository(log)


@pytest.fixture
def service(repo, log):
    return RecordingService(repo, FakeUnitOfWork(log), log)


class TestInsert:
    """Testes para CrudService.insert."""

    def test_ordem_pre_validate_save(self, service, log):
        """pre_insert antes de validate_insert, ambos antes do save."""
        service.insert(Item(nome="a"))

        assert log == ["begin", "pre_insert", "validate_insert", "save:None", "commit"]

    def test_retorna_model_com_id_gerado(self, service):
        saved = service.insert(Item(nome="  lapis "))

        assert saved.id == 100
        assert saved.nome == "lapis"

    def test_validacao_aborta_sem_persistir(self, service, repo, log):
        """BusinessException em validate_insert impede o save."""
        service.reject.add("validate_insert")

        with pytest.raises(BusinessException) as exc_info:
            service.insert(Item(nome="a"))

        assert exc_info.value.rule == "VALIDATE_INSERT"
        assert not any(entry.startswith("save") for entry in log)
        assert log[-1] == "rollback"
        assert repo.count() == 0

    def test_erro_do_repositorio_propagado_sem_traducao(self, service, repo, log):
        def boom(item):
            raise RuntimeError("conexão perdida")
        repo.save = boom

        with pytest.raises(RuntimeError, match="conexão perdida"):
            service.insert(Item(nome="a"))

        assert log[-1] == "rollback"


class TestUpdate:
    """Testes para CrudService.update."""

    def test_ordem_pre_validate_save(self, service, log):
        service.update(7, Item(nome="b"))

        assert log == ["begin", "pre_update", "validate_update", "save:7", "commit"]

    def test_id_do_parametro_prevalece(self, service, repo):
        model = Item(nome="b")

        result = service.update(7, model)

        assert result is None
        assert model.id is None
        assert repo.find_by_id(7).nome == "b"

    def test_validacao_abortada_nao_altera_model_do_chamador(self, service):
        service.reject.add("validate_update")
        model = Item(nome="x")

        with pytest.raises(BusinessException):
            service.update(77, model)

        assert model.id is None
        assert model.is_new

    def test_id_igual_aceito(self, service, repo):
        service.update(3, Item(id=3, nome="c"))

        assert repo.exists(3)

    def test_id_divergente_rejeitado(self, service, log):
        """ID do model diferente do parâmetro aborta antes dos hooks."""
        with pytest.raises(BusinessException) as exc_info:
            service.update(1, Item(id=2, nome="x"))

        assert exc_info.value.rule == "ID_DIVERGENTE"
        assert "pre_update" not in log
        assert not any(entry.startswith("save") for entry in log)
        assert log == ["begin", "rollback"]

    def test_validacao_aborta_sem_persistir(self, service, log):
        service.reject.add("validate_update")

        with pytest.raises(BusinessException):
            service.update(1, Item(nome="x"))

        assert log == ["begin", "pre_update", "validate_update", "rollback"]


class TestDelete:
    """Testes para CrudService.delete."""

    def test_validate_antes_de_pre_delete(self, service, repo, log):
        """Ordem invertida em relação a insert/update."""
        repo.items[5] = Item(id=5, nome="e")

        service.delete(5)

        assert log == [
            "begin",
            "validate_delete:5",
            "pre_delete:5",
            "delete_by_id:5",
            "commit",
        ]
        assert not repo.exists(5)

    def test_validacao_aborta_sem_pre_delete(self, service, repo, log):
        repo.items[5] = Item(id=5, nome="e")
        service.reject.add("validate_delete")

        with pytest.raises(BusinessException):
            service.delete(5)

        assert log == ["begin", "validate_delete:5", "rollback"]
        assert repo.exists(5)

    def test_id_inexistente_propaga_erro(self, service, log):
        with pytest.raises(EntityNotFoundError):
            service.delete(999)

        assert log[-1] == "rollback"


class TestDeleteMany:
    """Testes para CrudService.delete_many."""

    def test_remove_em_ordem_uma_transacao_por_id(self, service, repo, log):
        for i in (1, 2, 3):
            repo.items[i] = Item(id=i)

        service.delete_many([1, 2, 3])

        assert [e for e in log if e.startswith("delete_by_id")] == [
            "delete_by_id:1",
            "delete_by_id:2",
            "delete_by_id:3",
        ]
        assert log.count("begin") == 3
        assert log.count("commit") == 3
        assert repo.count() == 0

    def test_falha_no_meio_nao_reverte_anteriores(self, service, repo, log):
        """Segundo id falha: primeiro continua removido, terceiro nunca tentado."""
        for i in (1, 2, 3):
            repo.items[i] = Item(id=i)
        repo.fail_on_delete.add(2)

        with pytest.raises(EntityNotFoundError):
            service.delete_many([1, 2, 3])

        assert not repo.exists(1)
        assert repo.exists(2)
        assert repo.exists(3)
        assert "validate_delete:3" not in log
        assert "delete_by_id:3" not in log
        assert log.count("commit") == 1
        assert log.count("rollback") == 1

    def test_lista_vazia_nao_faz_nada(self, service, log):
        service.delete_many([])

        assert log == []

    def test_aceita_gerador(self, service, repo):
        for i in (1, 2):
            repo.items[i] = Item(id=i)

        service.delete_many(i for i in (1, 2))

        assert repo.count() == 0


class TestSearchService:
    """Testes para as consultas herdadas de SearchService."""

    def test_get_by_id_inexistente(self, service):
        with pytest.raises(EntityNotFoundError) as exc_info:
            service.get_by_id(42)

        assert exc_info.value.entity_id == 42
        assert exc_info.value.entity_type == "Recording"

    def test_consultas_delegam_ao_repositorio(self, service):
        saved = service.insert(Item(nome="a"))

        assert service.find_by_id(saved.id) == saved
        assert service.get_by_id(saved.id) == saved
        assert service.find_all() == [saved]
        assert service.exists(saved.id)
        assert service.count() == 1
        assert service.search().total == 1

    def test_consultas_nao_abrem_transacao(self, service, log):
        service.find_all()
        service.count()

        assert log == []


class TestBusinessException:
    """Serialização da exceção de negócio."""

    def test_to_dict_inclui_regra(self):
        exc = BusinessException("Descrição obrigatória", rule="DESCRICAO_OBRIGATORIA")

        assert exc.to_dict() == {
            "error": "BUSINESS_EXCEPTION",
            "message": "Descrição obrigatória",
            "rule": "DESCRICAO_OBRIGATORIA",
        }
        assert str(exc) == "[BUSINESS_EXCEPTION] Descrição obrigatória"
