"""Response models for the batch endpoints."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel


class BatchStatus(str, Enum):
    VALIDATING = "validating"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"
    FINALIZING = "finalizing"
    COMPLETED = "completed"
    EXPIRED = "expired"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (BatchStatus.FAILED, BatchStatus.COMPLETED,
                        BatchStatus.EXPIRED, BatchStatus.CANCELLED)


class RequestCounts(BaseModel):
    total: int
    completed: int
    failed: int


class BatchError(BaseModel):
    code: Optional[str] = None
    message: Optional[str] = None
    param: Optional[str] = None
    line: Optional[int] = None


class BatchErrors(BaseModel):
    object: Optional[str] = None
    data: List[BatchError] = []


class BatchObject(BaseModel):
    """A batch job. Polling for completion is up to the caller."""
    id: str
    object: str
    endpoint: str
    errors: Optional[BatchErrors] = None
    input_file_id: str
    completion_window: str
    status: BatchStatus
    output_file_id: Optional[str] = None
    error_file_id: Optional[str] = None
    created_at: int
    in_progress_at: Optional[int] = None
    expires_at: Optional[int] = None
    finalizing_at: Optional[int] = None
    completed_at: Optional[int] = None
    failed_at: Optional[int] = None
    expired_at: Optional[int] = None
    cancelling_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    request_counts: Optional[RequestCounts] = None
    metadata: Optional[Dict[str, str]] = None

    @property
    def is_done(self) -> bool:
        return self.status.is_terminal

    def result_file_id(self) -> Optional[str]:
        """Output file of a completed batch, error file of a failed one."""
        if self.status is BatchStatus.COMPLETED:
            return self.output_file_id
        if self.status is BatchStatus.FAILED:
            return self.error_file_id
        return None


class BatchListResponse(BaseModel):
    object: str
    data: List[BatchObject]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False
