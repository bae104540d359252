"""Route Modules - health probes plus the router factory shared by all resources.

Invariants:
    - Each router carries its own prefix and tags
    - Routes never contain business logic (delegate to ResourceHandler)
"""
