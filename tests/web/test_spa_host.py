import pytest

from constructora import create_app


@pytest.fixture
def spa_client(tmp_path, container, monkeypatch):
    (tmp_path / "index.html").write_text("<html>app</html>", encoding="utf-8")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "app.js").write_text("console.log(1)", encoding="utf-8")
    monkeypatch.setattr("config.testing.DIST_DIR", str(tmp_path))
    return create_app(settings_module="config.testing", container=container).test_client()


def test_static_file_and_index_fallback(spa_client):
    assert spa_client.get("/assets/app.js").get_data(as_text=True) == "console.log(1)"
    assert spa_client.get("/").get_data(as_text=True) == "<html>app</html>"
    assert spa_client.get("/proyectos/123").get_data(as_text=True) == "<html>app</html>"


def test_unknown_api_path_is_json_404(spa_client):
    resp = spa_client.get("/api/does-not-exist")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_without_build_directory(client):
    assert client.get("/").status_code == 404


@pytest.mark.parametrize("method", ["post", "put", "patch", "delete"])
def test_unknown_api_path_is_json_404_for_any_method(admin_client, method):
    resp = getattr(admin_client, method)("/api/does-not-exist", json={})

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_known_api_routes_still_win_over_fallback(admin_client):
    resp = admin_client.post("/api/projects", json={"name": "Casa Rivera", "clientName": "Luis", "landArea": 200, "constructionArea": 150})

    assert resp.status_code == 201


def test_write_methods_on_ui_paths_are_rejected(spa_client):
    assert spa_client.post("/proyectos").status_code == 405
