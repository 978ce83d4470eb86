"""
Type generation for record metadata.

Each module builds one kind of generated GraphQL artifact: object types,
connections, input objects, mutation payloads and root fields.
"""
