"""Infrastructure layer — filesystem access for documentation trees.

This layer depends only on stdlib.
It must never import from services, commands, or output.
"""
