"""
Configuração do projeto Catálogo Codeflix.

Módulos:
- settings: Configurações Django (ORM, logging)
- container: Dependency Injection Container
"""
