"""
models/ - Domain Models
=======================
Plain dataclasses mirroring the LightBnB tables, plus the property search filters.
"""
