"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports (lado direito): Repository, UnitOfWork
- Driving Ports (lado esquerdo): Definidos nos Use Cases

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.

Todas as operações de I/O são corrotinas e recebem um
CancellationToken opcional, repassado pelo Use Case.
"""

from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Protocol

from .exceptions import OperationCancelledError


# Type variable para entidades genéricas
T = TypeVar("T")


class CancellationToken:
    """
    Sinal de cancelamento cooperativo.

    O chamador cria o token e pode cancelá-lo a qualquer momento;
    cada fronteira de I/O consulta o token antes de prosseguir.

    Example:
        token = CancellationToken()
        task = asyncio.create_task(service.handle(input_dto, token))
        token.cancel()
    """

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self) -> None:
        """
        Raises:
            OperationCancelledError: Se o token já foi cancelado
        """
        if self._cancelled:
            raise OperationCancelledError()


def raise_if_cancelled(cancellation_token: Optional[CancellationToken]) -> None:
    """Atalho que aceita token ausente (None = nunca cancela)."""
    if cancellation_token is not None:
        cancellation_token.raise_if_cancelled()


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Finaliza (commit) as operações de persistência emitidas desde
    o último commit, como uma única fronteira transacional.

    O commit é sempre explícito. Como context manager assíncrono,
    o UoW apenas faz rollback se uma exceção escapar do bloco:

        async with uow:
            await repo.insert(category, token)
            await uow.commit(token)
        # Exceção dentro do bloco -> rollback automático

    Responsabilidades:
    - Gerenciar início/fim de transação
    - Commit/Rollback coordenado
    """

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Faz rollback se houve exceção no bloco.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            await self.rollback()
        return False  # Não suprime exceções

    @abstractmethod
    async def commit(self, cancellation_token: Optional[CancellationToken] = None) -> None:
        """
        Persiste todas as mudanças pendentes.

        Args:
            cancellation_token: Sinal de cancelamento do chamador
        """
        raise NotImplementedError

    @abstractmethod
    async def rollback(self) -> None:
        """
        Desfaz as mudanças pendentes.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `async with`.
        """
        raise NotImplementedError


class Repository(Protocol[T]):
    """
    Interface genérica de escrita para repositórios.

    Type Parameters:
        T: Tipo do agregado gerenciado pelo repositório

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
    """

    async def insert(
        self,
        entity: T,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """
        Persiste novo agregado.

        Args:
            entity: Agregado a ser persistido
            cancellation_token: Sinal de cancelamento do chamador
        """
        ...

