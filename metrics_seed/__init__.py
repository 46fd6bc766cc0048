"""
Seed loader for the metrics pipeline's MongoDB collections.
"""
