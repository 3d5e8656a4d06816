"""
Validação de Domínio - Regras reutilizáveis entre entidades.

Cada regra é um par predicado/mensagem parametrizado pelo nome
lógico do campo, de modo que o mesmo conjunto de regras serve a
qualquer entidade (Category, Genre, CastMember...).

Uso típico em uma entidade:
    validate([
        (self.name, not_null_or_empty("Name")),
        (self.name, min_length("Name", 3)),
        (self.description, not_null("Description")),
    ])

As regras são avaliadas na ordem fornecida e a avaliação para na
primeira violação; só então uma única EntityValidationError é lançada.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from .exceptions import EntityValidationError


@dataclass(frozen=True)
class ValidationRule:
    """
    Regra de validação: predicado + mensagem de erro.

    Attributes:
        field: Nome lógico do campo (ex: "Name")
        message: Mensagem exposta quando a regra é violada
        predicate: Função que retorna True quando o valor é válido
    """

    field: str
    message: str
    predicate: Callable[[Any], bool]

    def is_satisfied_by(self, value: Any) -> bool:
        return self.predicate(value)


def not_null(field_name: str) -> ValidationRule:
    return ValidationRule(
        field=field_name,
        message=f"{field_name} should not be null",
        predicate=lambda value: value is not None,
    )


def not_null_or_empty(field_name: str) -> ValidationRule:
    """Rejeita None, string vazia e string só com espaços."""
    return ValidationRule(
        field=field_name,
        message=f"{field_name} should not be empty or null",
        predicate=lambda value: value is not None and bool(value.strip()),
    )


def min_length(field_name: str, length: int) -> ValidationRule:
    # None é responsabilidade de not_null/not_null_or_empty
    return ValidationRule(
        field=field_name,
        message=f"{field_name} should be at least {length} characters long",
        predicate=lambda value: value is None or len(value) >= length,
    )


def max_length(field_name: str, length: int) -> ValidationRule:
    return ValidationRule(
        field=field_name,
        message=f"{field_name} should be less or equal {length} characters long",
        predicate=lambda value: value is None or len(value) <= length,
    )


def first_violation(
    checks: Iterable[Tuple[Any, ValidationRule]]
) -> Optional[ValidationRule]:
    """
    Retorna a primeira regra violada, ou None se todas passarem.

    Args:
        checks: Pares (valor, regra) na ordem de precedência

    Returns:
        Regra violada ou None
    """
    for value, rule in checks:
        if not rule.is_satisfied_by(value):
            return rule
    return None


def validate(checks: Iterable[Tuple[Any, ValidationRule]]) -> None:
    """
    Avalia as regras em ordem e lança erro para a primeira violação.

    Raises:
        EntityValidationError: Com a mensagem da primeira regra violada
    """
    violated = first_violation(checks)
    if violated is not None:
        raise EntityValidationError(violated.message, field=violated.field)


class DomainValidation:
    """
    Atalhos para validar um único valor contra uma única regra.

    Example:
        DomainValidation.not_null(description, "Description")
        DomainValidation.max_length(name, 255, "Name")
    """

    @staticmethod
    def not_null(target: Any, field_name: str) -> None:
        validate([(target, not_null(field_name))])

    @staticmethod
    def not_null_or_empty(target: Optional[str], field_name: str) -> None:
        validate([(target, not_null_or_empty(field_name))])

    @staticmethod
    def min_length(target: Optional[str], length: int, field_name: str) -> None:
        validate([(target, min_length(field_name, length))])

    @staticmethod
    def max_length(target: Optional[str], length: int, field_name: str) -> None:
        validate([(target, max_length(field_name, length))])
