"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive an executor, run parameterized SQL through it, and
return domain model objects.
"""
