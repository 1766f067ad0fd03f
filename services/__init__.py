"""
services/ - Business Logic Layer
================================
Workflows built on top of the repositories.
"""
