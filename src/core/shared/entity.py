"""
Base classes para Entidades e Agregados.

Toda entidade recebe um identificador UUID gerado uma única vez,
no momento da criação. Igualdade e hash são definidos pela
identidade (id), não pelos atributos.
"""

from typing import Optional
import uuid


class Entity:
    """
    Entidade de domínio com identidade própria.

    Attributes:
        id: Identificador único (UUID em string), imutável
    """

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id if entity_id is not None else str(uuid.uuid4())

    @property
    def id(self) -> str:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))


class AggregateRoot(Entity):
    """Raiz de agregado: único ponto de entrada para mutações."""
