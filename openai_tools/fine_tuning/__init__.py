"""Fine-tuning jobs, their events and checkpoints."""

from openai_tools.fine_tuning.request import CreateFineTuningJobRequest, FineTuning
from openai_tools.fine_tuning.response import FineTuningJob, FineTuningJobStatus

__all__ = ["CreateFineTuningJobRequest", "FineTuning", "FineTuningJob", "FineTuningJobStatus"]
