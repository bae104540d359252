"""Resource catalog: role-gated CRUD REST endpoints over independent record tables."""

__version__ = "1.0.0"
