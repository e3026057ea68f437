"""Content moderation for one or several input texts."""

import logging
from enum import Enum
from typing import List, Optional, Union

from openai_tools.common.client import ApiResource
from openai_tools.common.errors import MissingConfigurationError, parse_model
from openai_tools.common.models import model_id
from openai_tools.config.constants import LOGGER_NAME
from openai_tools.moderations.response import ModerationResponse

logger = logging.getLogger(LOGGER_NAME)

MODERATIONS_PATH = "moderations"


class ModerationModel(str, Enum):
    """Moderation models. Default: omni-moderation-latest."""
    OMNI_MODERATION_LATEST = "omni-moderation-latest"
    TEXT_MODERATION_LATEST = "text-moderation-latest"


class Moderations(ApiResource):
    """Client for the moderations endpoint."""

    def moderate_text(self, text: str,
                      model: Optional[Union[ModerationModel, str]] = None) -> ModerationResponse:
        return self._moderate(text, model)

    def moderate_texts(self, texts: List[str],
                       model: Optional[Union[ModerationModel, str]] = None) -> ModerationResponse:
        """Moderate several texts at once; results follow input order."""
        if not texts:
            raise MissingConfigurationError("Moderation needs at least one input text")
        return self._moderate(list(texts), model)

    def _moderate(self, moderation_input: Union[str, List[str]],
                  model: Optional[Union[ModerationModel, str]]) -> ModerationResponse:
        payload = {
            "input": moderation_input,
            "model": model_id(model or ModerationModel.OMNI_MODERATION_LATEST),
        }
        logger.info(f"Moderating with {payload['model']}")
        response = self.http.post(MODERATIONS_PATH, json=payload)
        return parse_model(ModerationResponse, response.text)
