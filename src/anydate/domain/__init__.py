"""Domain layer — layouts, candidate matches, and leaf decomposers.

This layer depends only on stdlib, pydantic, and :mod:`anydate.errors`.
It must never import from parsers, validators, or config.
"""
