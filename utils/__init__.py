"""
utils/ - Shared Utilities
=========================
Logging setup and the error types used across layers.
"""
