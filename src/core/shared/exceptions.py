"""
Exceções de Domínio do Catálogo Codeflix.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── EntityValidationError (invariante de entidade violada)
    ├── EntityNotFoundError (entidade não existe)
    └── OperationCancelledError (operação cancelada pelo chamador)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    A mensagem é exposta sem prefixos em ``str(exc)``: ela faz parte
    do comportamento observável (testes e clientes comparam o texto).
    O código fica disponível em ``code`` e em ``to_dict()``.

    Example:
        try:
            category.update("")
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class EntityValidationError(DomainException):
    """
    Invariante de entidade violada.

    Lançada de forma síncrona pela própria entidade sempre que uma
    regra de validação falha, na construção ou em uma mutação.

    Example:
        if len(name) < 3:
            raise EntityValidationError(
                "Name should be at least 3 characters long",
                field="Name",
            )
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.

    Example:
        category = await repo.get_by_id(category_id)
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class OperationCancelledError(DomainException):
    """
    Operação abandonada a pedido do chamador.

    Lançada quando um CancellationToken já cancelado chega a uma
    fronteira de I/O (repositório, unit of work).
    """

    def __init__(self, message: str = "Operation was cancelled"):
        super().__init__(message, "OPERATION_CANCELLED")
