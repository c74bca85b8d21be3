"""
Application layer - Use cases for govmeta.

This layer contains:
- Ports (graph accessor, document expander)
- The typed extraction service
- Serialization DTOs

Application imports from domain only.
"""

__all__: list[str] = []
