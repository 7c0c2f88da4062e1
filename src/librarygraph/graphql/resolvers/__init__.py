"""Resolver package for the GraphQL schema.

Types and root queries import these functions lazily from their field
methods; each resolver reads the catalog repository from the GraphQL context.
"""
