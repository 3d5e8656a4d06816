"""
Ports (Interfaces) do Domínio de Categorias.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência de categorias.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoCategoryRepository:
        async def insert(self, category, cancellation_token=None) -> None:
            model = CategoryMapper.to_model(category)
            await model.asave(force_insert=True)
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.interfaces import CancellationToken, Repository, raise_if_cancelled

from .entities import Category


@runtime_checkable
class CategoryRepository(Repository[Category], Protocol):
    """
    Interface para persistência de Categorias.

    Usando Protocol para duck typing: qualquer objeto com
    `insert` assíncrono compatível serve.

    Implementações:
    - DjangoCategoryRepository (ORM)
    - InMemoryCategoryRepository (para testes)

    Falhas de persistência são específicas de cada adapter e
    propagam sem tradução até o chamador do use case.
    """

    async def insert(
        self,
        category: Category,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """
        Persiste nova categoria.

        Args:
            category: Agregado já validado
            cancellation_token: Sinal de cancelamento do chamador
        """
        ...


class InMemoryCategoryRepository:
    """
    Implementação em memória do CategoryRepository.

    Útil para:
    - Testes unitários
    - Prototipagem
    - Desenvolvimento local

    Não usar em produção!

    Example:
        repo = InMemoryCategoryRepository()
        await repo.insert(category)
        found = await repo.get_by_id(category.id)
    """

    def __init__(self):
        self._categories: Dict[str, Category] = {}

    async def insert(
        self,
        category: Category,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """
        Salva categoria em memória.

        Raises:
            ValueError: Se já existir categoria com o mesmo id
        """
        raise_if_cancelled(cancellation_token)
        if category.id in self._categories:
            raise ValueError(f"Category {category.id} already exists")
        self._categories[category.id] = category

    async def get_by_id(
        self,
        category_id: str,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Category:
        """
        Busca categoria por ID.

        Raises:
            EntityNotFoundError: Se não existir
        """
        raise_if_cancelled(cancellation_token)
        category = self._categories.get(category_id)
        if category is None:
            raise EntityNotFoundError(
                f"Category {category_id} not found",
                entity_type="Category",
                entity_id=category_id,
            )
        return category

    def list_all(self) -> List[Category]:
        """Lista todas as categorias."""
        return list(self._categories.values())

    def count(self) -> int:
        """Conta total."""
        return len(self._categories)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._categories.clear()
