"""
Pydantic schemas for the documents stored in the metadata and
duplication collections.
"""

from typing import List
from pydantic import BaseModel, Field


class MetadataRecord(BaseModel):
    """Identity of a running workload, looked up by pod to enrich its metrics."""

    pod: str = Field(..., description="Workload instance identifier")
    service: str = Field(..., description="Logical service name")
    team: str = Field(..., description="Owning team")
    tier: str = Field(..., description="Criticality classification (e.g., 'critical')")


class DuplicationViewRecord(BaseModel):
    """Named label grouping used to duplicate metrics into an aggregated view."""

    view: str = Field(..., description="View name (e.g., 'operational', 'business')")
    labels: List[str] = Field(..., description="Label keys defining the grouping, in order")
