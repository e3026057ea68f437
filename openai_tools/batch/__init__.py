"""
Batch jobs: asynchronous, discounted processing of JSONL request files.

A batch reads requests from an uploaded file (purpose ``batch``) and, once
completed, exposes results through ``output_file_id`` and failures through
``error_file_id``.
"""

from openai_tools.batch.request import BatchEndpoint, Batches, CompletionWindow, CreateBatchRequest
from openai_tools.batch.response import BatchObject, BatchStatus

__all__ = [
    "BatchEndpoint",
    "BatchObject",
    "BatchStatus",
    "Batches",
    "CompletionWindow",
    "CreateBatchRequest",
]
