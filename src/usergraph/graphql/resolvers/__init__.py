"""Resolver functions backing the root query and mutation types.

Resolvers read the ``UserStore`` from the GraphQL context under the ``store`` key.
"""
