"""
Configuração do Django App para Categorias.
"""

from django.apps import AppConfig


class CategoriesConfig(AppConfig):
    """Configuração do app Categorias."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.categories'
    label = 'categories'
    verbose_name = 'Catálogo de Categorias'
