"""Domain layer: sanitizing, decomposing, checksumming and rendering RUTs.

This layer depends only on the stdlib.
It must never import from services, output, commands, or config.
"""
