"""
govmeta - Governance Metadata Extraction

Converts CIP-100 governance metadata, published as JSON-LD and expanded
into predicate-keyed graph nodes, into a strictly typed and validated
document model: hash algorithm, cosigning authors with witnesses, body
commentary, references and external update feeds.

Guarantees:
- A document either fully validates or extraction fails
- The first violation is reported with its path from the document root
- Author, reference and update order follows the source document
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
