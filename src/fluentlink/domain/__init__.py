"""Domain layer — locale records, nodes, flags, and URL rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
