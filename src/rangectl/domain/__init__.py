"""Domain layer — civil time values, zones, ranges and constraints.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
