"""Tests for the images client."""

import base64

import pytest

from conftest import make_response, sent_json, sent_url
from openai_tools.common.errors import InvalidArgumentError, MissingConfigurationError
from openai_tools.images.request import (
    EditOptions,
    GenerateOptions,
    ImageModel,
    ImageResponseFormat,
    ImageSize,
    Images,
)
from openai_tools.images.response import ImageData

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


def test_generate(api_key, mock_request):
    mock_request.return_value = make_response({
        "created": 1700000000,
        "data": [{"url": "https://example.com/img.png", "revised_prompt": "A red fox"}],
    })

    result = Images().generate("A fox", GenerateOptions(size=ImageSize.SIZE_1024X1024))

    assert sent_url(mock_request).endswith("/images/generations")
    assert sent_json(mock_request) == {"prompt": "A fox", "model": "dall-e-3", "size": "1024x1024"}
    assert result.data[0].url == "https://example.com/img.png"


def test_b64_image_bytes(api_key, mock_request):
    encoded = base64.b64encode(PNG_BYTES).decode("ascii")
    mock_request.return_value = make_response({"created": 1, "data": [{"b64_json": encoded}]})

    result = Images().generate("x", GenerateOptions(
        model=ImageModel.GPT_IMAGE_1, response_format=ImageResponseFormat.B64_JSON,
    ))

    assert result.data[0].as_bytes() == PNG_BYTES


def test_url_image_has_no_bytes():
    with pytest.raises(InvalidArgumentError):
        ImageData(url="https://example.com/x.png").as_bytes()


def test_edit_single_image_with_mask(api_key, mock_request, tmp_path):
    path = tmp_path / "room.png"
    path.write_bytes(PNG_BYTES)
    mock_request.return_value = make_response({"created": 1, "data": [{"url": "u"}]})

    Images().edit([path], "Add a plant", mask=("mask.png", PNG_BYTES),
                  options=EditOptions(n=2))

    kwargs = mock_request.call_args.kwargs
    fields = [name for name, _ in kwargs["files"]]
    assert fields == ["image", "mask"]
    assert kwargs["files"][0][1] == ("room.png", PNG_BYTES, "image/png")
    assert ("prompt", "Add a plant") in kwargs["data"]
    assert ("n", "2") in kwargs["data"]


def test_edit_several_images_uses_array_field(api_key, mock_request):
    mock_request.return_value = make_response({"created": 1, "data": [{"url": "u"}]})
    Images().edit([("a.png", PNG_BYTES), ("b.jpg", b"jpeg")], "Combine")
    fields = [name for name, _ in mock_request.call_args.kwargs["files"]]
    assert fields == ["image[]", "image[]"]


def test_edit_requires_images(api_key, mock_request):
    with pytest.raises(MissingConfigurationError):
        Images().edit([], "x")


def test_variation_rejects_unknown_extension(api_key, mock_request):
    with pytest.raises(InvalidArgumentError):
        Images().variation(("photo.tiff", b"data"))
