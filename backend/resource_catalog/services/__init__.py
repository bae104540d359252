"""Services Layer - the generic resource handler and the resource registry.

Invariants:
    - One handler class serves every resource; resources differ only by descriptor
    - Services talk to persistence through the RecordStore protocol only
"""
