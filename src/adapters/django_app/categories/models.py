"""
Django Models para o domínio de Categorias.

Estes models são ADAPTERS - implementam a persistência para o
agregado definido em src/core/categories/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers
"""

from django.db import models


class CategoryModel(models.Model):
    """
    Model Django para persistência de Categorias.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        name: Nome da categoria
        description: Descrição (pode ser vazia)
        is_active: Se está ativa
        created_at: Timestamp de criação (vem da Entity)
    """

    # Primary Key - UUID gerado pela Entity
    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da categoria"
    )

    name = models.CharField(
        max_length=255,
        db_index=True,
        help_text="Nome da categoria"
    )

    description = models.TextField(
        max_length=10000,
        blank=True,
        default='',
        help_text="Descrição da categoria"
    )

    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Se a categoria está ativa no catálogo"
    )

    # Sem auto_now_add: o instante de criação pertence à Entity
    created_at = models.DateTimeField(
        help_text="Data/hora de criação"
    )

    class Meta:
        db_table = 'categories'
        verbose_name = 'Categoria'
        verbose_name_plural = 'Categorias'
        ordering = ['-created_at']
        indexes = [
            models.Index(
                fields=['is_active', 'created_at'],
                name='categories_active_created_idx',
            ),
        ]

    def __str__(self):
        return f"[{self.id[:8]}] {self.name}"
