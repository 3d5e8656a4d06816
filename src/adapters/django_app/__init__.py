"""
Django Adapters - implementações dos Ports do Core com Django ORM.
"""
