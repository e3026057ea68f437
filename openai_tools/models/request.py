"""Model metadata: list, retrieve, and delete fine-tuned models."""

import logging

from openai_tools.common.client import ApiResource
from openai_tools.common.errors import parse_model
from openai_tools.config.constants import LOGGER_NAME
from openai_tools.models.response import DeleteResponse, Model, ModelsListResponse

logger = logging.getLogger(LOGGER_NAME)

MODELS_PATH = "models"


class Models(ApiResource):
    """Client for the models endpoints."""

    def list(self) -> ModelsListResponse:
        response = self.http.get(MODELS_PATH)
        return parse_model(ModelsListResponse, response.text)

    def retrieve(self, model_id: str) -> Model:
        response = self.http.get(f"{MODELS_PATH}/{model_id}")
        return parse_model(Model, response.text)

    def delete(self, model_id: str) -> DeleteResponse:
        """
        Delete a fine-tuned model you own.

        The service refuses to delete base models and models owned by other
        organizations; that refusal surfaces as a RemoteError.
        """
        logger.info(f"Deleting model {model_id}")
        response = self.http.delete(f"{MODELS_PATH}/{model_id}")
        return parse_model(DeleteResponse, response.text)
