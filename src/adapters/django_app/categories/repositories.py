"""
Repositórios Django para persistência de Categorias.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar CategoryRepository protocol
- Mapear entities para models e vice-versa
- Executar queries no banco via ORM assíncrono

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Escritas acontecem dentro da transação do UnitOfWork
"""

from typing import Optional
import logging

from src.core.categories.entities import Category
from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.interfaces import CancellationToken, raise_if_cancelled

from ..shared.unit_of_work import DjangoUnitOfWork
from .models import CategoryModel
from .mappers import CategoryMapper

logger = logging.getLogger(__name__)


class DjangoCategoryRepository:
    """
    Implementação Django do CategoryRepository.

    Compartilha o DjangoUnitOfWork com o use case: a primeira escrita
    abre a transação e o commit do UoW a finaliza.

    Example:
        uow = DjangoUnitOfWork()
        repo = DjangoCategoryRepository(uow)

        await repo.insert(category)
        await uow.commit()

        category = await repo.get_by_id(category.id)
    """

    def __init__(self, uow: DjangoUnitOfWork):
        """
        Inicializa repository.

        Args:
            uow: Unit of Work dono da transação
        """
        self._uow = uow
        self._mapper = CategoryMapper()

    async def insert(
        self,
        category: Category,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """
        Insere nova categoria.

        Args:
            category: Agregado a persistir
            cancellation_token: Sinal de cancelamento do chamador

        Raises:
            OperationCancelledError: Se o token já estiver cancelado
            django.db.IntegrityError: Se o id já existir (a transação
                do UoW é desfeita antes de re-lançar)
        """
        raise_if_cancelled(cancellation_token)
        await self._uow.begin()

        logger.debug(f"Inserting category: {category.id}")
        model = self._mapper.to_model(category)
        try:
            await model.asave(force_insert=True, using=self._uow.using)
        except Exception as e:
            logger.error(f"Insert failed for category {category.id}: {e}")
            await self._uow.rollback()
            raise

        logger.info(f"Category inserted: {category.id}")

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
        try:
            model = await CategoryModel.objects.using(self._uow.using).aget(id=category_id)
        except CategoryModel.DoesNotExist:
            logger.debug(f"Category not found: {category_id}")
            raise EntityNotFoundError(
                f"Category {category_id} not found",
                entity_type="Category",
                entity_id=category_id,
            )
        return self._mapper.to_entity(model)
