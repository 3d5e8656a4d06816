"""
Data Transfer Objects (DTOs) do Domínio de Categorias.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de modelos internos (entidades) para camadas externas.

Tipos de DTOs:
- Input DTOs: Recebem dados de entrada (de Forms/APIs/scripts)
- Output DTOs: Snapshot do agregado para resposta

Os defaults dos campos opcionais são resolvidos aqui, uma única vez,
na fronteira DTO → domínio.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import Category


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateCategoryInputDTO:
    """
    DTO de entrada para criar categoria.

    Imutável (frozen=True) para garantir que os dados de entrada
    não sejam alterados durante o use case.

    Attributes:
        name: Nome da categoria (obrigatório)
        description: Descrição (default: ""). None é repassado ao
            agregado, que o rejeita
        is_active: Se nasce ativa (default: True)
    """

    name: str
    description: Optional[str] = ""
    is_active: bool = True

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass(frozen=True)
class CategoryOutputDTO:
    """
    DTO de saída com o snapshot de uma categoria.

    Cópia dos valores no momento da conversão: mutações posteriores
    na entidade não se refletem aqui.

    Attributes:
        id: Identificador único
        name: Nome
        description: Descrição
        is_active: Se está ativa
        created_at: Data/hora de criação
    """

    id: str
    name: str
    description: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: Category) -> "CategoryOutputDTO":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Agregado Category

        Returns:
            DTO com dados da entidade
        """
        return cls(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
        }
