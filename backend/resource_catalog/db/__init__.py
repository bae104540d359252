"""Database Metadata - declarative base and column types shared by the ORM models."""
