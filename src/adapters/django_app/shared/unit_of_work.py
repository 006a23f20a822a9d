"""
Unit of Work - Implementação Django.

Delimita cada operação de escrita dos services em uma transação
explícita: begin ao entrar no `with`, commit ao sair sem erro,
rollback se qualquer exceção escapar do bloco.

Blocos aninhados viram savepoints (comportamento de
django.db.transaction.atomic).
"""

from typing import List
import logging

from django.db import DEFAULT_DB_ALIAS, transaction

from src.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Usa django.db.transaction.atomic em modo manual, mantendo
    uma pilha de blocos para permitir reuso e aninhamento.

    Example:
        with DjangoUnitOfWork() as uow:
            repo.save(entity1)
            repo.save(entity2)
        # Commit automático

    Example com rollback:
        with DjangoUnitOfWork():
            repo.save(entity)
            raise Exception("Erro!")
        # Rollback automático
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        """
        Args:
            using: Alias do banco em settings.DATABASES
        """
        self._using = using
        self._atomic_blocks: List[transaction.Atomic] = []
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        block = transaction.atomic(using=self._using)
        block.__enter__()
        self._atomic_blocks.append(block)
        self._committed = False
        self._rolled_back = False
        logger.debug(f"Transaction started (depth={len(self._atomic_blocks)})")

    def commit(self) -> None:
        """
        Finaliza o bloco corrente com sucesso.

        Raises:
            Exception: Se o commit falhar (o atomic já reverteu)
        """
        if not self._atomic_blocks:
            logger.warning("No active transaction to commit")
            return

        block = self._atomic_blocks.pop()
        try:
            block.__exit__(None, None, None)
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self._rolled_back = True
            raise

        self._committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """Desfaz o bloco corrente."""
        if not self._atomic_blocks:
            return

        block = self._atomic_blocks.pop()
        transaction.set_rollback(True, using=self._using)
        block.__exit__(None, None, None)

        self._rolled_back = True
        logger.debug("Transaction rolled back")

    @property
    def in_transaction(self) -> bool:
        return bool(self._atomic_blocks)

    @property
    def is_committed(self) -> bool:
        """Verifica se a última transação foi comitada."""
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se a última transação foi revertida."""
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas conta commits e rollbacks
    para testes unitários sem banco de dados.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            ...
        assert uow.committed
    """

    def __init__(self):
        self.commits = 0
        self.rollbacks = 0
        self._depth = 0

    def _begin_transaction(self) -> None:
        self._depth += 1

    def commit(self) -> None:
        self._depth -= 1
        self.commits += 1

    def rollback(self) -> None:
        self._depth -= 1
        self.rollbacks += 1

    @property
    def committed(self) -> bool:
        return self.commits > 0

    @property
    def rolled_back(self) -> bool:
        return self.rollbacks > 0

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

