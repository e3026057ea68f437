"""
Batch job control.

A batch consumes an uploaded JSONL file of requests against one endpoint and
produces an output file within the completion window.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel

from openai_tools.batch.response import BatchListResponse, BatchObject
from openai_tools.common.client import ApiResource, page_params
from openai_tools.common.errors import MissingConfigurationError, parse_model
from openai_tools.config.constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

BATCHES_PATH = "batches"


class BatchEndpoint(str, Enum):
    CHAT_COMPLETIONS = "/v1/chat/completions"
    EMBEDDINGS = "/v1/embeddings"
    COMPLETIONS = "/v1/completions"
    RESPONSES = "/v1/responses"
    MODERATIONS = "/v1/moderations"


class CompletionWindow(str, Enum):
    HOURS_24 = "24h"


class CreateBatchRequest(BaseModel):
    input_file_id: str
    endpoint: BatchEndpoint
    completion_window: CompletionWindow = CompletionWindow.HOURS_24
    metadata: Optional[Dict[str, str]] = None

    def to_payload(self) -> Dict[str, Any]:
        if not self.input_file_id:
            raise MissingConfigurationError("Batch request has no input file id")
        return self.model_dump(mode="json", exclude_none=True)


class Batches(ApiResource):
    """Client for the batch endpoints."""

    def create(self, request: CreateBatchRequest) -> BatchObject:
        payload = request.to_payload()
        logger.info(f"Creating batch for {request.endpoint.value} from {request.input_file_id}")
        response = self.http.post(BATCHES_PATH, json=payload)
        return parse_model(BatchObject, response.text)

    def retrieve(self, batch_id: str) -> BatchObject:
        response = self.http.get(f"{BATCHES_PATH}/{batch_id}")
        return parse_model(BatchObject, response.text)

    def cancel(self, batch_id: str) -> BatchObject:
        logger.info(f"Cancelling batch {batch_id}")
        response = self.http.post(f"{BATCHES_PATH}/{batch_id}/cancel")
        return parse_model(BatchObject, response.text)

    def list(self, limit: Optional[int] = None, after: Optional[str] = None) -> BatchListResponse:
        response = self.http.get(BATCHES_PATH, params=page_params(limit, after))
        return parse_model(BatchListResponse, response.text)
