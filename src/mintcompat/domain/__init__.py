"""Domain layer — segmentation, rewrite rules, and the compat transform.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
