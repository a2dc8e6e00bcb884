"""
Core package for the wealth quintile explorer.

Submodules provide data loading, filtering, aggregation, export and user
interface rendering helpers that are orchestrated by the top-level `app.py`.
"""
