"""Tests for the moderations client."""

import pytest

from conftest import make_response, sent_json
from openai_tools.common.errors import MissingConfigurationError
from openai_tools.moderations.request import ModerationModel, Moderations

CATEGORIES = {
    "hate": False, "hate/threatening": False, "harassment": True,
    "harassment/threatening": True, "self-harm": False, "self-harm/intent": False,
    "self-harm/instructions": False, "sexual": False, "sexual/minors": False,
    "violence": False, "violence/graphic": False,
}
SCORES = {name: (0.9 if flagged else 0.01) for name, flagged in CATEGORIES.items()}


def moderation_body(count=1):
    return {
        "id": "modr-1",
        "model": "omni-moderation-latest",
        "results": [
            {"flagged": True, "categories": CATEGORIES, "category_scores": SCORES}
            for _ in range(count)
        ],
    }


def test_moderate_text(api_key, mock_request):
    mock_request.return_value = make_response(moderation_body())

    result = Moderations().moderate_text("you are awful").results[0]

    assert sent_json(mock_request) == {"input": "you are awful", "model": "omni-moderation-latest"}
    assert result.flagged
    assert result.categories.harassment_threatening
    assert result.category_scores.harassment == 0.9
    assert result.flagged_categories() == ["harassment", "harassment_threatening"]


def test_moderate_texts_keeps_order(api_key, mock_request):
    mock_request.return_value = make_response(moderation_body(count=2))

    response = Moderations().moderate_texts(["a", "b"], ModerationModel.TEXT_MODERATION_LATEST)

    assert sent_json(mock_request) == {"input": ["a", "b"], "model": "text-moderation-latest"}
    assert len(response.results) == 2


def test_moderate_texts_requires_input(api_key, mock_request):
    with pytest.raises(MissingConfigurationError):
        Moderations().moderate_texts([])
    mock_request.assert_not_called()
