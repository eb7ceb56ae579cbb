"""Infrastructure layer: filesystem access and template loading.

This layer depends on stdlib, config and third-party libs (Jinja2).
It must never import from domain, services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
