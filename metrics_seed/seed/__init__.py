"""
Seed module for populating the metadata and duplication collections.
"""

from .seed_data import run_seed

__all__ = ["run_seed"]
