from io import BytesIO

from app import create_app


def test_home_lists_plugins():
    app = create_app("TestingConfig")
    client = app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    titles = [item["title"] for item in payload["data"]["plugins"]]
    assert "PDF Page Splitter" in titles
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Request-ID")


def test_plugin_summary_comes_from_config(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        "site:\n  title: Offline Tools\nplugins:\n  pdf_splitter:\n    summary: Custom text\n",
        encoding="utf-8",
    )
    app = create_app("TestingConfig", config_path=config_file)
    payload = app.test_client().get("/").get_json()["data"]
    assert payload["title"] == "Offline Tools"
    splitter = next(item for item in payload["plugins"] if item["blueprint"] == "pdf_splitter")
    assert splitter["summary"] == "Custom text"


def test_unknown_route_returns_json_error():
    client = create_app("TestingConfig").test_client()
    response = client.get("/missing")
    assert response.status_code == 404
    assert response.get_json()["error"]["code"] == "not_found"


def test_oversized_request_returns_json_error():
    app = create_app("TestingConfig")
    app.config["MAX_CONTENT_LENGTH"] = 1024
    client = app.test_client()
    data = {"file": (BytesIO(b"%PDF-" + b"0" * 4096), "big.pdf"), "ranges": "1"}
    response = client.post(
        "/api/pdf_splitter/split", data=data, content_type="multipart/form-data"
    )
    assert response.status_code == 413
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "payload_too_large"
