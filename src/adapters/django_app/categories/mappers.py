"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- Converter Category → CategoryModel (para persistência)
- Converter CategoryModel → Category (para uso no Core)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from typing import Iterable, List

from src.core.categories.entities import Category

from .models import CategoryModel


class CategoryMapper:
    """
    Mapper para conversão entre Category e CategoryModel.

    Responsável por:
    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - to_entity_list(): List[Model] → List[Entity]
    """

    @staticmethod
    def to_model(entity: Category) -> CategoryModel:
        """
        Converte Category para CategoryModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return CategoryModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: CategoryModel) -> Category:
        """
        Converte CategoryModel para Category.

        Usa Category.restore() para preservar id e created_at;
        os dados passam novamente pela validação da entidade.
        """
        return Category.restore(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    @staticmethod
    def to_entity_list(models: Iterable[CategoryModel]) -> List[Category]:
        """Converte lista de Models para lista de Entities."""
        return [CategoryMapper.to_entity(model) for model in models]
