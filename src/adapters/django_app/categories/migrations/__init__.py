"""Migrations do app Categorias."""
