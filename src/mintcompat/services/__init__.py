"""Service layer — operations over documentation trees returning ServiceResult.

Services may import from domain, config, plugins, and infrastructure.
They must never import from commands or output.
"""
