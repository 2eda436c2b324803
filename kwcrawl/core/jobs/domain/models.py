from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, Optional
from uuid import UUID
from ..types import JobType, JobStatus

@dataclass(frozen=True)
class JobSubmission:
    """
    DTO for requesting a new job.
    """
    job_type: JobType
    payload: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class JobRecord:
    """
    Detached snapshot of a job row, safe to use after the session closes.
    """
    id: UUID
    job_type: JobType
    status: JobStatus
    payload: Dict[str, Any]
    result_meta: Dict[str, Any]
    created_at: Optional[datetime]
    started_at: Optional[datetime]
    finished_at: Optional[datetime]
    error_message: Optional[str]
