import pytest
from fastapi.testclient import TestClient

from csharp_scanner.api.http import app

from conftest import INSIDE_FULL_PROPERTY_ALT, INSIDE_METHOD_BODY, METHOD_LINE, SAMPLE_CLASS


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_namespace_found(client):
    resp = client.post("/namespace", json={"text": SAMPLE_CLASS})
    assert resp.status_code == 200
    assert resp.json() == {"name": "Sample", "errors": []}


def test_namespace_missing_reports_error(client):
    body = client.post("/namespace", json={"text": "foo bar"}).json()
    assert body["name"] is None
    assert len(body["errors"]) == 1


def test_class_name(client):
    body = client.post("/class-name", json={"text": SAMPLE_CLASS}).json()
    assert body["name"] == "MyClass"


def test_member_name(client):
    body = client.post("/member-name", json={"text": "public (int a, int b) Pair { get; }"}).json()
    assert body["name"] == "Pair"


def test_inherited_names(client):
    body = client.post(
        "/inherited-names", json={"text": SAMPLE_CLASS, "include_base_classes": False}
    ).json()
    assert body["names"] == ["IMyClass", "IMyTypedClass"]


def test_line_signature(client):
    body = client.post("/signature/line", json={"text": SAMPLE_CLASS, "line": METHOD_LINE}).json()
    assert body["signature_type"] == "Method"
    assert body["signature"].startswith("public Task<int> GetNewIdAsync<TNewType>(")


def test_line_signature_out_of_range(client):
    resp = client.post("/signature/line", json={"text": SAMPLE_CLASS, "line": 999})
    assert resp.status_code == 400


def test_negative_line_is_rejected(client):
    resp = client.post("/signature/method", json={"text": SAMPLE_CLASS, "line": -1})
    assert resp.status_code == 422


def test_method_signature_at_cursor(client):
    body = client.post("/signature/method", json={"text": SAMPLE_CLASS, "line": INSIDE_METHOD_BODY}).json()
    assert body["signature_type"] == "Method"
    assert body["signature"].startswith("Task<int> GetNewIdAsync")


def test_property_signature_outside_property_is_unknown(client):
    body = client.post("/signature/property", json={"text": SAMPLE_CLASS, "line": INSIDE_METHOD_BODY}).json()
    assert body == {"signature": None, "signature_type": "Unknown"}


def test_property_signature_at_cursor(client):
    body = client.post(
        "/signature/property", json={"text": SAMPLE_CLASS, "line": INSIDE_FULL_PROPERTY_ALT}
    ).json()
    assert body == {"signature": "string FullPropertyAlt", "signature_type": "FullProperty"}


def test_current_line(client):
    body = client.post("/current-line", json={"text": SAMPLE_CLASS, "line": 5}).json()
    assert body["line"] == "namespace Sample"


def test_usings_and_line_ending(client):
    crlf = SAMPLE_CLASS.replace("\n", "\r\n")
    assert client.post("/line-ending", json={"text": crlf}).json() == {"text": "\r\n"}
    body = client.post("/usings", json={"text": crlf}).json()
    assert body["statements"][0] == "using System;\r\n"


def test_replace_usings_detects_line_ending(client):
    crlf = SAMPLE_CLASS.replace("\n", "\r\n")
    body = client.post("/usings/replace", json={"text": crlf, "statements": ["using Only;"]}).json()
    assert body["text"].startswith("using Only;\r\n\r\nnamespace Sample")
