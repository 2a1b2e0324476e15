"""
Infrastructure layer module.

Contains implementations of the external integrations.
"""
