"""Response models for the fine-tuning endpoints."""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel


class FineTuningJobStatus(str, Enum):
    VALIDATING_FILES = "validating_files"
    QUEUED = "queued"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (FineTuningJobStatus.SUCCEEDED, FineTuningJobStatus.FAILED,
                        FineTuningJobStatus.CANCELLED)


class Hyperparameters(BaseModel):
    """Training hyperparameters; the service also reports ``"auto"``."""
    n_epochs: Optional[Union[int, Literal["auto"]]] = None
    batch_size: Optional[Union[int, Literal["auto"]]] = None
    learning_rate_multiplier: Optional[Union[float, Literal["auto"]]] = None
    beta: Optional[Union[float, Literal["auto"]]] = None


class FineTuningError(BaseModel):
    code: Optional[str] = None
    message: Optional[str] = None
    param: Optional[str] = None


class Integration(BaseModel):
    """A third-party integration such as Weights and Biases."""
    type: str
    wandb: Optional[Dict[str, Any]] = None


class SupervisedConfig(BaseModel):
    hyperparameters: Optional[Hyperparameters] = None


class DpoConfig(BaseModel):
    hyperparameters: Optional[Hyperparameters] = None


class MethodConfig(BaseModel):
    """Training method: ``supervised`` or ``dpo``."""
    type: Literal["supervised", "dpo"]
    supervised: Optional[SupervisedConfig] = None
    dpo: Optional[DpoConfig] = None

    @classmethod
    def supervised_method(cls, hyperparameters: Optional[Hyperparameters] = None) -> "MethodConfig":
        return cls(type="supervised", supervised=SupervisedConfig(hyperparameters=hyperparameters))

    @classmethod
    def dpo_method(cls, hyperparameters: Optional[Hyperparameters] = None) -> "MethodConfig":
        return cls(type="dpo", dpo=DpoConfig(hyperparameters=hyperparameters))


class FineTuningJob(BaseModel):
    """
    A fine-tuning job. ``fine_tuned_model`` is set once the job succeeded.
    """
    id: str
    object: str
    model: str
    created_at: int
    finished_at: Optional[int] = None
    fine_tuned_model: Optional[str] = None
    organization_id: Optional[str] = None
    result_files: List[str] = []
    status: FineTuningJobStatus
    validation_file: Optional[str] = None
    training_file: str
    hyperparameters: Optional[Hyperparameters] = None
    trained_tokens: Optional[int] = None
    error: Optional[FineTuningError] = None
    seed: Optional[int] = None
    estimated_finish: Optional[int] = None
    integrations: Optional[List[Integration]] = None
    method: Optional[MethodConfig] = None
    user_provided_suffix: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None

    @property
    def is_done(self) -> bool:
        return self.status.is_terminal


class FineTuningJobListResponse(BaseModel):
    object: str
    data: List[FineTuningJob]
    has_more: bool = False


class FineTuningEvent(BaseModel):
    id: str
    object: str
    created_at: int
    level: str
    message: str
    data: Optional[Any] = None
    type: Optional[str] = None


class FineTuningEventListResponse(BaseModel):
    object: str
    data: List[FineTuningEvent]
    has_more: bool = False


class CheckpointMetrics(BaseModel):
    step: Optional[float] = None
    train_loss: Optional[float] = None
    train_mean_token_accuracy: Optional[float] = None
    valid_loss: Optional[float] = None
    valid_mean_token_accuracy: Optional[float] = None
    full_valid_loss: Optional[float] = None
    full_valid_mean_token_accuracy: Optional[float] = None


class FineTuningCheckpoint(BaseModel):
    id: str
    object: str
    created_at: int
    fine_tuning_job_id: str
    fine_tuned_model_checkpoint: str
    step_number: int
    metrics: CheckpointMetrics


class FineTuningCheckpointListResponse(BaseModel):
    object: str
    data: List[FineTuningCheckpoint]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False
