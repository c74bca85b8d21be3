"""
Value objects for govmeta.

Value objects are immutable types defined by their attributes rather
than identity. Two value objects with the same attributes are equal.
"""

from govmeta.domain.value_objects.iri import Iri, validate_iri

__all__: list[str] = ["Iri", "validate_iri"]
