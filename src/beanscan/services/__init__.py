"""Service layer: scanning classes into type models.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
