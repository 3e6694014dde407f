"""
Shared Kernel - base classes, value objects, events and exceptions
used across the project and facility domains.
"""
