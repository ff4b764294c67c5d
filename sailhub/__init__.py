"""GitHub GraphQL building blocks: enums, value types, query texts, a git tree model and settings."""

__version__ = "0.1.2"