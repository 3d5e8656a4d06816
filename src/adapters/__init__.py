"""
Adapters Layer - Implementações de infraestrutura para os Ports do Core.
"""
