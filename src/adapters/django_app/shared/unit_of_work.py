"""
Unit of Work - Implementação Django.

Gerencia a transação que envolve as escritas dos repositórios,
finalizando-a de forma explícita via commit.

Responsabilidades:
- Iniciar transação (sob demanda, na primeira escrita)
- Commit/Rollback coordenado
- Restaurar auto-commit da conexão ao final

O ORM do Django é síncrono para transações: todas as chamadas passam
por `sync_to_async` (thread_sensitive=True), que executa na mesma
thread das operações assíncronas do ORM (`asave`, `aget`), garantindo
que transação e escritas compartilham a mesma conexão.
"""

from typing import Optional
import logging

from asgiref.sync import sync_to_async
from django.db import DEFAULT_DB_ALIAS, transaction

from src.core.shared.interfaces import (
    CancellationToken,
    UnitOfWork,
    raise_if_cancelled,
)

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Usa django.db.transaction em modo manual (autocommit desligado).
    Repositórios chamam `begin()` antes de escrever; o use case chama
    `commit()` ao final.

    Example:
        uow = DjangoUnitOfWork()
        repo = DjangoCategoryRepository(uow)

        async with uow:
            await repo.insert(category)
            await uow.commit()
        # Exceção dentro do bloco -> rollback automático
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        """
        Inicializa Unit of Work.

        Args:
            using: Alias do banco em settings.DATABASES
        """
        self.using = using
        self._transaction_started = False

    async def begin(self) -> None:
        """
        Inicia transação se ainda não houver uma aberta.

        Desabilita auto-commit para controle manual.
        """
        if not self._transaction_started:
            await sync_to_async(transaction.set_autocommit)(False, using=self.using)
            self._transaction_started = True
            logger.debug("Transaction started")

    async def commit(self, cancellation_token: Optional[CancellationToken] = None) -> None:
        """
        Persiste as escritas emitidas desde o último commit.

        Raises:
            OperationCancelledError: Se o token já estiver cancelado;
                as escritas pendentes são desfeitas antes
            Exception: Se commit falhar, faz rollback e re-lança
        """
        if cancellation_token is not None and cancellation_token.is_cancelled:
            logger.debug("Commit cancelled, rolling back")
            await self.rollback()
            raise_if_cancelled(cancellation_token)

        if not self._transaction_started:
            logger.debug("Nothing to commit")
            return

        try:
            await sync_to_async(transaction.commit)(using=self.using)
            logger.debug("Transaction committed")
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            await self.rollback()
            raise
        finally:
            await self._finalize()

    async def rollback(self) -> None:
        """
        Desfaz as escritas pendentes.

        Chamado automaticamente se exceção ocorrer dentro do `async with`.
        """
        if not self._transaction_started:
            return

        try:
            await sync_to_async(transaction.rollback)(using=self.using)
            logger.debug("Transaction rolled back")
        except Exception as e:
            logger.error(f"Rollback failed: {e}")
            raise
        finally:
            await self._finalize()

    async def _finalize(self) -> None:
        """Restaura auto-commit da conexão."""
        if self._transaction_started:
            self._transaction_started = False
            await sync_to_async(transaction.set_autocommit)(True, using=self.using)

    @property
    def in_transaction(self) -> bool:
        """Verifica se há transação aberta."""
        return self._transaction_started


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas registra chamadas para
    testes unitários sem banco de dados.

    Example:
        uow = InMemoryUnitOfWork()
        await uow.commit()

        assert uow.committed
        assert uow.commit_count == 1
    """

    def __init__(self):
        """Inicializa UoW em memória."""
        self.commit_count = 0
        self.rollback_count = 0

    async def commit(self, cancellation_token: Optional[CancellationToken] = None) -> None:
        """Simula commit."""
        raise_if_cancelled(cancellation_token)
        self.commit_count += 1

    async def rollback(self) -> None:
        """Simula rollback."""
        self.rollback_count += 1

    @property
    def committed(self) -> bool:
        """Verifica se foi comitado."""
        return self.commit_count > 0

    @property
    def rolled_back(self) -> bool:
        """Verifica se foi revertido."""
        return self.rollback_count > 0
