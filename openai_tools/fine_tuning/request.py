"""
Fine-tuning job control.

Usage:
```python
request = CreateFineTuningJobRequest(
    model=FineTuningModel.GPT_4O_MINI_2024_07_18,
    training_file="file-abc123",
    method=MethodConfig.supervised_method(Hyperparameters(n_epochs=3)),
)
job = FineTuning().create(request)
```
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator

from openai_tools.common.client import ApiResource, page_params
from openai_tools.common.errors import MissingConfigurationError, parse_model
from openai_tools.common.models import FineTuningModel, model_id
from openai_tools.config.constants import LOGGER_NAME
from openai_tools.fine_tuning.response import (
    FineTuningCheckpointListResponse,
    FineTuningEventListResponse,
    FineTuningJob,
    FineTuningJobListResponse,
    Integration,
    MethodConfig,
)

logger = logging.getLogger(LOGGER_NAME)

FINE_TUNING_PATH = "fine_tuning/jobs"


class CreateFineTuningJobRequest(BaseModel):
    """Request descriptor for ``POST /fine_tuning/jobs``."""
    model: str = FineTuningModel.GPT_4O_MINI_2024_07_18.value
    training_file: str
    validation_file: Optional[str] = None
    suffix: Optional[str] = None
    seed: Optional[int] = None
    method: Optional[MethodConfig] = None
    integrations: Optional[List[Integration]] = None
    metadata: Optional[Dict[str, str]] = None

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v):
        return model_id(v)

    def to_payload(self) -> Dict[str, Any]:
        if not self.training_file:
            raise MissingConfigurationError("Fine-tuning request has no training file")
        return self.model_dump(mode="json", exclude_none=True)


class FineTuning(ApiResource):
    """Client for the fine-tuning endpoints."""

    def create(self, request: CreateFineTuningJobRequest) -> FineTuningJob:
        payload = request.to_payload()
        logger.info(f"Creating fine-tuning job on {request.model} from {request.training_file}")
        response = self.http.post(FINE_TUNING_PATH, json=payload)
        return parse_model(FineTuningJob, response.text)

    def retrieve(self, job_id: str) -> FineTuningJob:
        response = self.http.get(f"{FINE_TUNING_PATH}/{job_id}")
        return parse_model(FineTuningJob, response.text)

    def cancel(self, job_id: str) -> FineTuningJob:
        logger.info(f"Cancelling fine-tuning job {job_id}")
        response = self.http.post(f"{FINE_TUNING_PATH}/{job_id}/cancel")
        return parse_model(FineTuningJob, response.text)

    def list(self, limit: Optional[int] = None, after: Optional[str] = None) -> FineTuningJobListResponse:
        response = self.http.get(FINE_TUNING_PATH, params=page_params(limit, after))
        return parse_model(FineTuningJobListResponse, response.text)

    def list_events(self, job_id: str, limit: Optional[int] = None,
                    after: Optional[str] = None) -> FineTuningEventListResponse:
        response = self.http.get(f"{FINE_TUNING_PATH}/{job_id}/events",
                                 params=page_params(limit, after))
        return parse_model(FineTuningEventListResponse, response.text)

    def list_checkpoints(self, job_id: str, limit: Optional[int] = None,
                         after: Optional[str] = None) -> FineTuningCheckpointListResponse:
        response = self.http.get(f"{FINE_TUNING_PATH}/{job_id}/checkpoints",
                                 params=page_params(limit, after))
        return parse_model(FineTuningCheckpointListResponse, response.text)
