"""Domain layer — roles, skill-name rules, and role variants.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
