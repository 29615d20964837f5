"""Domain layer: elements, properties, type models, instances.

Depends on stdlib, pydantic, and the raw introspection adapter in
:mod:`beanscan.infrastructure.introspection`. The only upward reference
is ``Instance.wrap``, which defers its import of the scanner.
"""
