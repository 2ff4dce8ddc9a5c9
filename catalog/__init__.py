"""
catalog/__init__.py
-------------------
Product catalog, user directory and the in-memory Store.
"""
