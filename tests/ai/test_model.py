import pytest

from constructora.ai.model import GenerateRequest, data_url_to_inline_data, sanitize_config
from constructora.core.exceptions import ValidationError


def test_sanitize_config_keeps_only_known_keys():
    config = {
        "responseMimeType": "application/json",
        "systemInstruction": "Eres un asistente",
        "temperature": 2,
        "tools": [{"googleSearch": {"x": 1}}, {"codeExecution": {}}, "bad"],
    }

    assert sanitize_config(config) == {
        "responseMimeType": "application/json",
        "systemInstruction": "Eres un asistente",
        "tools": [{"googleSearch": {}}],
    }


@pytest.mark.parametrize("config", [None, "x", {}, {"temperature": 1}, {"tools": [{"codeExecution": {}}]}])
def test_sanitize_config_empty_results(config):
    assert sanitize_config(config) is None


def test_generate_request_validation():
    with pytest.raises(ValidationError) as exc:
        GenerateRequest.from_payload({"model": "gpt-4", "prompt": "hola"})
    assert str(exc.value) == "Model not allowed."

    with pytest.raises(ValidationError) as exc:
        GenerateRequest.from_payload({"model": "gemini-3-flash-preview", "prompt": 5})
    assert str(exc.value) == "Request must include prompt (string) or parts (array)."


def test_parts_take_precedence_over_prompt():
    req = GenerateRequest.from_payload(
        {"model": "gemini-3-flash-preview", "prompt": "ignored", "parts": [{"text": "hola"}]}
    )

    assert req.contents() == [{"role": "user", "parts": [{"text": "hola"}]}]


def test_data_url_to_inline_data():
    assert data_url_to_inline_data("data:image/png;base64,AAAA") == {"mimeType": "image/png", "data": "AAAA"}

    with pytest.raises(ValueError, match="Invalid data URL"):
        data_url_to_inline_data("data:image/png;base64")
    with pytest.raises(ValueError, match="expected base64"):
        data_url_to_inline_data("data:image/png,AAAA")
