"""Domain layer — letter value type, case enum, and conversion errors.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""
