"""
Testes para o container de injeção de dependências (implementações em memória).
"""

import pytest

from src.config.container import TestingContainer, get_container, reset_container
from src.core.categories.dtos import CreateCategoryInputDTO
from src.core.categories.use_cases import CreateCategoryService


@pytest.fixture
def container():
    return TestingContainer()


class TestTestingContainer:
    """Testes para TestingContainer."""

    def test_monta_service(self, container):
        service = container.create_category_service()

        assert isinstance(service, CreateCategoryService)
        assert service.category_repo is container.category_repository()
        assert service.uow is container.unit_of_work()

    @pytest.mark.anyio
    async def test_service_persiste_no_repositorio_em_memoria(self, container):
        service = container.create_category_service()

        output = await service.handle(CreateCategoryInputDTO(name="Action"))

        repo = container.category_repository()
        persisted = await repo.get_by_id(output.id)
        assert persisted.name == "Action"
        assert container.unit_of_work().committed


class TestGlobalContainer:
    """Testes para get_container/reset_container."""

    def test_get_container_e_singleton(self):
        reset_container()

        assert get_container() is get_container()

    def test_reset_container_cria_novo(self):
        first = get_container()

        reset_container()

        assert get_container() is not first
        reset_container()
