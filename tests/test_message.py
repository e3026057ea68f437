"""Tests for chat messages, content parts and image encoding."""

import base64
import io
from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from openai_tools.common.errors import InvalidArgumentError
from openai_tools.common.function import Function, ToolCall
from openai_tools.common.message import (
    Message,
    encode_image_file,
    image_file_part,
    image_url_part,
    text_part,
)
from openai_tools.common.role import Role


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "dot.png"
    Image.new("RGB", (4, 4), color=(255, 0, 0)).save(path, format="PNG")
    return path


def test_text_message():
    message = Message.from_string(Role.USER, "Hello")
    assert message.to_dict() == {"role": "user", "content": "Hello"}
    assert message.text == "Hello"


def test_parts_keep_order():
    message = Message.from_message_array(Role.USER, [
        text_part("first"),
        image_url_part("https://example.com/cat.png"),
        text_part("second"),
    ])
    content = message.to_dict()["content"]
    assert [part["type"] for part in content] == ["input_text", "input_image", "input_text"]
    assert content[1]["image_url"] == "https://example.com/cat.png"
    assert message.text == "first\nsecond"


def test_message_without_content_fails_to_serialize():
    with pytest.raises(InvalidArgumentError):
        Message(role=Role.ASSISTANT).to_dict()


def test_tool_calls_alone_are_not_content():
    call = ToolCall(id="c1", function=Function(name="f", arguments={"a": 1}))
    with pytest.raises(InvalidArgumentError):
        Message(role=Role.ASSISTANT, tool_calls=[call]).to_dict()


def test_tool_call_response():
    message = Message.from_tool_call_response('{"temp": 21}', "call_1")
    assert message.to_dict() == {"role": "tool", "content": '{"temp": 21}', "tool_call_id": "call_1"}


def test_message_round_trips_parts():
    data = Message.from_message_array(Role.USER, [text_part("hi")]).to_dict()
    parsed = Message.model_validate(data)
    assert parsed.content[0].text == "hi"


def test_encode_image_file(png_file):
    url = encode_image_file(png_file)
    assert url.startswith("data:image/png;base64,")
    decoded = base64.b64decode(url.split(",", 1)[1])
    with Image.open(io.BytesIO(decoded)) as image:
        assert image.format == "PNG"
        assert image.size == (4, 4)


def test_image_file_part(png_file):
    part = image_file_part(png_file)
    assert part.type == "input_image"
    assert part.image_url.startswith("data:image/png;base64,")


def test_uppercase_jpeg_extension(tmp_path):
    path = tmp_path / "photo.JPG"
    Image.new("RGB", (2, 2)).save(path, format="JPEG")
    assert encode_image_file(path).startswith("data:image/jpeg;base64,")


def test_unsupported_extension(tmp_path):
    path = tmp_path / "image.bmp"
    path.write_bytes(b"BM")
    with pytest.raises(InvalidArgumentError):
        encode_image_file(path)


def test_unreadable_image(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    with pytest.raises(InvalidArgumentError):
        encode_image_file(path)


def test_token_count_uses_encoding():
    encoding = MagicMock()
    encoding.encode.return_value = [1, 2, 3]
    with patch("openai_tools.common.message._encoding", return_value=encoding):
        assert Message.from_string(Role.USER, "three tokens here").get_input_token_count() == 3
    encoding.encode.assert_called_once_with("three tokens here")


def test_token_count_without_text_is_zero():
    assert Message(role=Role.USER).get_input_token_count() == 0
