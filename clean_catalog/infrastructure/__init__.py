"""
Infrastructure Layer

Contains storage implementations, configuration, logging and dependency
wiring. Depends on the domain and application layers, never the reverse.
"""
