"""
Configurações globais do Pytest para o Catálogo Codeflix.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

import pytest


@pytest.fixture
def anyio_backend():
    """Testes assíncronos (pytest.mark.anyio) rodam sobre asyncio."""
    return "asyncio"


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modifica coleção de testes."""
    # Adicionar skip para testes de integração se não houver banco
    skip_integration = pytest.mark.skip(reason="Integration tests require database")

    for item in items:
        if "integration" in item.keywords:
            # Apenas pular se não estivermos em modo de integração
            if not config.getoption("--run-integration", default=False):
                item.add_marker(skip_integration)


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )
