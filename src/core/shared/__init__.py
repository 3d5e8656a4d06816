"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Regras de validação reutilizáveis
- Base classes para Entidades/Agregados
- Interfaces (Ports)
"""

from .exceptions import (
    DomainException,
    EntityValidationError,
    EntityNotFoundError,
    OperationCancelledError,
)
from .entity import Entity, AggregateRoot
from .interfaces import CancellationToken, Repository, UnitOfWork
from .validation import DomainValidation, ValidationRule

__all__ = [
    "DomainException",
    "EntityValidationError",
    "EntityNotFoundError",
    "OperationCancelledError",
    "Entity",
    "AggregateRoot",
    "CancellationToken",
    "Repository",
    "UnitOfWork",
    "DomainValidation",
    "ValidationRule",
]
