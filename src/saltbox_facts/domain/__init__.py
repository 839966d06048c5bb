"""Domain layer: types, validation, and pure parsing rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
