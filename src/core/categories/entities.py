"""
Entidades do Domínio de Categorias.

Este módulo define o agregado Category do catálogo de mídia.

Regras de Negócio Encapsuladas:
- Validação completa na criação e em toda mutação
- Nome obrigatório, entre 3 e 255 caracteres
- Descrição obrigatória (pode ser vazia), até 10.000 caracteres
- Identificador e data de criação imutáveis
"""

from datetime import datetime, timezone
from typing import Optional

from src.core.shared.entity import AggregateRoot
from src.core.shared.validation import (
    max_length,
    min_length,
    not_null,
    not_null_or_empty,
    validate,
)


class Category(AggregateRoot):
    """
    Entidade de Domínio: Category.

    Agregado autovalidado: nenhuma instância observável viola
    as invariantes de nome e descrição. Toda operação que pode
    alterar estado roda a validação completa ANTES de aplicar a
    mudança; se falhar, o estado anterior permanece intacto (e,
    no construtor, nenhuma instância é produzida).

    Invariantes:
    - Nome não nulo, não vazio, sem ser só espaços
    - Nome com 3 a 255 caracteres
    - Descrição não nula, com no máximo 10.000 caracteres

    Attributes:
        id: Identificador único (UUID)
        name: Nome da categoria
        description: Descrição (default: "")
        is_active: Se a categoria está ativa (default: True)
        created_at: Data/hora de criação (UTC)

    Example:
        category = Category("Action", "Action movies")
        category.deactivate()
        category.update("Adventure")
    """

    # Constantes de validação
    NAME_MIN_LENGTH: int = 3
    NAME_MAX_LENGTH: int = 255
    DESCRIPTION_MAX_LENGTH: int = 10_000

    def __init__(
        self,
        name: str,
        description: Optional[str] = "",
        is_active: bool = True,
    ):
        """
        Cria categoria validada.

        Raises:
            EntityValidationError: Se alguma invariante for violada
        """
        super().__init__()
        self._validate(name, description)

        self._name = name
        self._description = description
        self._is_active = is_active
        self._created_at = datetime.now(timezone.utc)

    @classmethod
    def restore(
        cls,
        id: str,
        name: str,
        description: str,
        is_active: bool,
        created_at: datetime,
    ) -> "Category":
        """
        Reconstrói categoria já persistida (usado por Mappers).

        Preserva id e created_at originais, mas passa pela mesma
        validação do construtor.

        Raises:
            EntityValidationError: Se os dados persistidos forem inválidos
        """
        cls._validate(name, description)

        category = cls.__new__(cls)
        AggregateRoot.__init__(category, id)
        category._name = name
        category._description = description
        category._is_active = is_active
        category._created_at = created_at
        return category

    @classmethod
    def _validate(cls, name: Optional[str], description: Optional[str]) -> None:
        """Nome primeiro, depois descrição; a primeira violação vence."""
        validate([
            (name, not_null_or_empty("Name")),
            (name, min_length("Name", cls.NAME_MIN_LENGTH)),
            (name, max_length("Name", cls.NAME_MAX_LENGTH)),
            (description, not_null("Description")),
            (description, max_length("Description", cls.DESCRIPTION_MAX_LENGTH)),
        ])

    # Propriedades somente leitura

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    # Mutações

    def activate(self) -> None:
        """Ativa a categoria."""
        self._validate(self._name, self._description)
        self._is_active = True

    def deactivate(self) -> None:
        """Desativa a categoria."""
        self._validate(self._name, self._description)
        self._is_active = False

    def update(self, name: str, description: Optional[str] = None) -> None:
        """
        Atualiza nome e, opcionalmente, descrição.

        Args:
            name: Novo nome
            description: Nova descrição; None mantém a atual

        Raises:
            EntityValidationError: Se o resultado violar invariantes
                (nesse caso nada é alterado)
        """
        new_description = self._description if description is None else description
        self._validate(name, new_description)

        self._name = name
        self._description = new_description

    def __repr__(self) -> str:
        return (
            f"Category(id={self.id}, name={self._name!r}, "
            f"is_active={self._is_active})"
        )
