"""
recordql: derive a GraphQL schema from record type metadata.
"""

__version__ = "0.1.0"
