"""Infrastructure layer: raw class introspection and the type model cache.

This layer depends on stdlib and, lazily, on config. It must never import
from domain, services, commands, or output at runtime.
"""
