"""
Infrastructure layer - Adapters for govmeta.

This layer contains:
- Expanded JSON-LD graph accessor
- Document expander and HTTP metadata client
- Observability (structlog configuration, correlation IDs)

Infrastructure imports from domain and application.
"""

__all__: list[str] = []
