"""
Domínio de Categorias - Catálogo de Mídia.

Este módulo contém toda a lógica de negócio relacionada a
categorias do catálogo, incluindo:
- Entidades (Category)
- Use Cases (CreateCategoryService)
- DTOs (Input/Output Data Transfer Objects)
- Ports (Interfaces para repositórios)

Características do Domínio:
- Agregado autovalidado: invariantes checadas em toda mutação
- Ativação/desativação e atualização controladas pela entidade
- Criação orquestrada com persistência e commit explícitos
"""

from .entities import Category
from .dtos import CreateCategoryInputDTO, CategoryOutputDTO
from .ports import CategoryRepository, InMemoryCategoryRepository
from .use_cases import CreateCategoryService

__all__ = [
    # Entities
    "Category",
    # DTOs
    "CreateCategoryInputDTO",
    "CategoryOutputDTO",
    # Ports
    "CategoryRepository",
    "InMemoryCategoryRepository",
    # Use Cases
    "CreateCategoryService",
]
