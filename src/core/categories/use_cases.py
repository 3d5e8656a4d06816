"""
Use Cases (Application Services) do Domínio de Categorias.

Este módulo contém os casos de uso da aplicação, que orquestram
a lógica de negócio coordenando entidades, repositórios e transações.

Use Cases implementados:
- CreateCategoryService: Cria nova categoria

Responsabilidades dos Use Cases:
- Resolver DTO de entrada em agregado (validação fica na entidade)
- Persistir via repositório
- Finalizar transação via UoW
- Retornar DTOs de saída

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
- Erros de validação e de I/O propagam sem tradução
"""

from typing import Optional
import logging

from src.core.shared.interfaces import (
    CancellationToken,
    UnitOfWork,
    raise_if_cancelled,
)

from .ports import CategoryRepository
from .entities import Category
from .dtos import CreateCategoryInputDTO, CategoryOutputDTO

logger = logging.getLogger(__name__)


class CreateCategoryService:
    """
    Use Case: Criar uma nova categoria.

    Fluxo:
    1. Criar agregado Category (validação acontece aqui, antes de I/O)
    2. Inserir via repositório
    3. Commit via Unit of Work
    4. Retornar DTO de saída

    Garantias:
    - insert sempre antes de commit
    - commit nunca é chamado se insert falhar
    - nenhum I/O se a validação falhar

    Se insert tiver sucesso e commit falhar (ou for cancelado), o
    escopo transacional pertence ao UoW: este use case não faz rollback.

    Attributes:
        category_repo: Repositório de categorias
        uow: Unit of Work para transações

    Example:
        service = CreateCategoryService(category_repo, uow)
        output = await service.handle(
            CreateCategoryInputDTO(name="Action", description="Action movies"),
            CancellationToken(),
        )
        print(output.id)
    """

    def __init__(self, category_repo: CategoryRepository, uow: UnitOfWork):
        """
        Inicializa service com dependências injetadas.

        Args:
            category_repo: Repositório para persistência
            uow: Unit of Work para commit
        """
        self.category_repo = category_repo
        self.uow = uow

    async def handle(
        self,
        input_dto: CreateCategoryInputDTO,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> CategoryOutputDTO:
        """
        Executa criação de categoria.

        Args:
            input_dto: Dados de entrada
            cancellation_token: Sinal de cancelamento, repassado ao
                repositório e ao UoW

        Returns:
            DTO com dados da categoria criada

        Raises:
            EntityValidationError: Se dados inválidos
            OperationCancelledError: Se o token for cancelado antes do I/O
        """
        category = Category(
            name=input_dto.name,
            description=input_dto.description,
            is_active=input_dto.is_active,
        )

        raise_if_cancelled(cancellation_token)

        logger.debug(f"Inserting category: {category.id}")
        await self.category_repo.insert(category, cancellation_token)

        logger.debug(f"Committing category: {category.id}")
        await self.uow.commit(cancellation_token)

        logger.info(f"Category created: {category.id}")
        return CategoryOutputDTO.from_entity(category)
