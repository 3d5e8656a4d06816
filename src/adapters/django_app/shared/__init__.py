"""
Componentes compartilhados entre os apps Django (Unit of Work).
"""
