"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Benefícios:
- Dependências explícitas
- Testabilidade (fácil mockar)
- Lazy-loading (criado sob demanda)

Padrões:
- Singleton: Uma instância para toda app (repositórios em memória)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Alias do banco e demais parâmetros

O repositório Django e o use case precisam compartilhar o MESMO
Unit of Work (o repositório abre a transação, o use case faz commit),
por isso cada chamada de `create_category_service()` constrói um UoW
novo e o entrega aos dois.
"""

from dependency_injector import containers, providers
from typing import Optional


def _django_unit_of_work(using: str):
    # Lazy import: adapters Django só depois de django.setup()
    from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
    return DjangoUnitOfWork(using=using)


def _django_create_category_service(uow):
    from src.adapters.django_app.categories.repositories import DjangoCategoryRepository
    from src.core.categories.use_cases import CreateCategoryService
    return CreateCategoryService(
        category_repo=DjangoCategoryRepository(uow),
        uow=uow,
    )


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Variáveis de ambiente/settings
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        from src.config.container import get_container

        container = get_container()
        service = container.create_category_service()
        output = await service.handle(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration(default={"database_alias": "default"})

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        _django_unit_of_work,
        using=config.database_alias,
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    create_category_service = providers.Factory(
        _django_create_category_service,
        uow=unit_of_work,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes com implementações em memória.

    Repositório e UoW são Singletons para que o teste consiga
    inspecionar o que o service persistiu/comitou.

    Example:
        container = TestingContainer()
        service = container.create_category_service()
        await service.handle(input_dto)
        assert container.unit_of_work().committed
    """

    # Evita que o pytest tente coletar esta classe
    __test__ = False

    config = providers.Configuration()

    # InMemory implementations
    category_repository = providers.Singleton(
        lambda: __import__(
            'src.core.categories.ports',
            fromlist=['InMemoryCategoryRepository']
        ).InMemoryCategoryRepository()
    )

    unit_of_work = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['InMemoryUnitOfWork']
        ).InMemoryUnitOfWork()
    )

    # Services com InMemory dependencies
    create_category_service = providers.Factory(
        lambda category_repo, uow: __import__(
            'src.core.categories.use_cases',
            fromlist=['CreateCategoryService']
        ).CreateCategoryService(
            category_repo=category_repo,
            uow=uow,
        ),
        category_repo=category_repository,
        uow=unit_of_work,
    )
