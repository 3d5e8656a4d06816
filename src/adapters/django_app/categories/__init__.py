"""
Django App de Categorias - Adapter de persistência do domínio.
"""
