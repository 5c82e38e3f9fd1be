"""
Contracts (data models).

This folder defines the request/response shapes for the Catalog Service
integration:
- Category tree records returned by the categories query
- The navigable menu tree built from them
- The collaborator interfaces (config provider, transport) the core consumes

Both mock and real HTTP clients should use these contracts.
"""
