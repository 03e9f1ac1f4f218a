from constructora.ai.model import GenerateResult, InlineImage

URL = "/api/gemini/generate"


def test_proxy_needs_no_session_and_returns_text(client, gemini):
    gemini.results.append(GenerateResult(text="hola", images=[InlineImage(data="QUJD", mime_type="image/png")]))

    resp = client.post(URL, json={"model": "gemini-3-flash-preview", "prompt": "hola", "config": {"temperature": 1}})

    assert resp.status_code == 200
    assert resp.get_json() == {"text": "hola", "images": [{"data": "QUJD", "mimeType": "image/png"}]}
    assert gemini.requests[0].config is None


def test_model_not_allowed_is_plain_text(client):
    resp = client.post(URL, json={"model": "other", "prompt": "hola"})

    assert resp.status_code == 400
    assert resp.mimetype == "text/plain"
    assert resp.get_data(as_text=True) == "Model not allowed."


def test_missing_prompt_and_parts(client):
    resp = client.post(URL, json={"model": "gemini-3-flash-preview"})

    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Request must include prompt (string) or parts (array)."


def test_not_configured_is_503(client, gemini):
    gemini.configured = False

    resp = client.post(URL, json={"model": "gemini-3-flash-preview", "prompt": "hola"})

    assert resp.status_code == 503
    assert resp.get_data(as_text=True) == "Gemini is not configured on this server."


def test_rate_limited_after_sixty_requests(client):
    body = {"model": "gemini-3-flash-preview", "prompt": "hola"}
    headers = {"X-Forwarded-For": "203.0.113.9, 10.0.0.1"}

    statuses = [client.post(URL, json=body, headers=headers).status_code for _ in range(61)]

    assert statuses[:60] == [200] * 60
    assert statuses[60] == 429
    assert client.post(URL, json=body, headers={"X-Forwarded-For": "198.51.100.1"}).status_code == 200
