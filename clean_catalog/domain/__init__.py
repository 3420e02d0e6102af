"""
Domain Layer

Contains the business entities, repository contracts and domain errors.
Nothing in this layer depends on storage or delivery technology.
"""
