"""
Presentation Layer

Formats use case output for delivery. Controllers that adapt inbound
requests live outside this package.
"""
