"""
Document models for the seeded collections.
"""

from .schemas import MetadataRecord, DuplicationViewRecord

__all__ = [
    "MetadataRecord",
    "DuplicationViewRecord",
]
