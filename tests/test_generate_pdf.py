"""
Tests for POST /generate-pdf.
"""

from fastapi.testclient import TestClient


def test_generate_plain_body(client: TestClient, renderer) -> None:
    resp = client.post("/generate-pdf", json={"body": "<p>Hello</p>"})

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.headers["content-disposition"] == 'attachment; filename="document.pdf"'
    assert resp.headers["content-length"] == str(len(renderer.pdf))
    assert resp.content == renderer.pdf

    html, options = renderer.calls[0]
    assert html == "<main><p>Hello</p></main>"
    assert options.display_header_footer is False


def test_generate_with_header_and_document(client: TestClient, renderer) -> None:
    resp = client.post("/generate-pdf", json={
        "header": "/assets/header.png",
        "body": "before{original_cv}after",
        "original_cv": "/docs/cv.pdf",
    })

    assert resp.status_code == 200
    html, options = renderer.calls[0]
    assert options.margins.top == 136
    assert options.header_template and options.footer_template
    assert html.count("data:image/png;base64,") == 3


def test_null_fields_are_ignored(client: TestClient, renderer) -> None:
    resp = client.post("/generate-pdf", json={
        "header": None, "footer": "", "body": None, "watermark": None,
    })

    assert resp.status_code == 200
    html, options = renderer.calls[0]
    assert html == "<main></main>"
    assert options.display_header_footer is False


def test_invalid_header_is_403(client: TestClient, renderer) -> None:
    resp = client.post("/generate-pdf", json={
        "header": "/assets/notes.txt",
        "body": "<p>x</p>",
    })

    assert resp.status_code == 403
    assert resp.json() == {"message": "Header file is not valid"}
    assert renderer.calls == []


def test_invalid_footer_is_403(client: TestClient) -> None:
    resp = client.post("/generate-pdf", json={"footer": "/missing.png", "body": ""})

    assert resp.status_code == 403
    assert resp.json()["message"] == "Footer file is not valid"


def test_broken_document_is_403(client: TestClient) -> None:
    resp = client.post("/generate-pdf", json={
        "body": "{original_cv}",
        "original_cv": "/docs/broken.pdf",
    })

    assert resp.status_code == 403
    assert resp.json()["message"] == "Original CV file is not valid"


def test_render_failure_is_403(client: TestClient, renderer) -> None:
    async def boom(html, options):
        raise RuntimeError("")

    renderer.render = boom
    resp = client.post("/generate-pdf", json={"body": "<p/>"})

    assert resp.status_code == 403
    assert resp.json() == {"message": "Server error"}


def test_malformed_body_is_403(client: TestClient) -> None:
    resp = client.post("/generate-pdf", json=["not", "an", "object"])

    assert resp.status_code == 403
    assert "message" in resp.json()


def test_request_id_and_security_headers(client: TestClient) -> None:
    resp = client.get("/health", headers={"X-Request-ID": "req_abc"})

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["x-request-id"] == "req_abc"
    assert resp.headers["x-content-type-options"] == "nosniff"


def test_root(client: TestClient) -> None:
    assert client.get("/").json()["service"] == "PdfHelper"


def test_error_outside_route_is_403(client: TestClient) -> None:
    from pdfhelper.modules.render.router import get_composer
    from pdfhelper.shared.errors import RenderError

    def broken_composer():
        raise RenderError("Renderer unavailable")

    client.app.dependency_overrides[get_composer] = broken_composer
    resp = client.post("/generate-pdf", json={"body": "<p/>"})

    assert resp.status_code == 403
    assert resp.json() == {"message": "Renderer unavailable"}
    assert "x-request-id" in resp.headers
