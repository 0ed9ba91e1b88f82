"""
Core validation engine: rules, requirement resolution, messages and models.
"""
