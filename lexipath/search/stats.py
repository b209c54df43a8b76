"""Per-query search statistics."""

from pydantic import BaseModel, Field


class SearchStats(BaseModel):
    """Counters collected while answering one query."""

    origin: str
    target: str
    result: int
    expanded: int = Field(0, ge=0, description="Nodes popped from the frontier")
    generated: int = Field(0, ge=0, description="Candidate words produced by edits")
    accepted: int = Field(0, ge=0, description="Candidates that passed validation")
    queued: int = Field(0, ge=0, description="Candidates that changed the frontier")
    explored: int = Field(0, ge=0, description="Distinct words in the explored map")
    capped: bool = Field(False, description="Stopped by the expansion cap")
    elapsed_time: float = Field(0.0, ge=0)
