"""Domain layer: datatypes, rules, chains, and target adapters.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
