import json

from src.api.generate_openapi import generate_openapi


def test_generate_openapi_writes_schema(tmp_path):
    out = tmp_path / "interfaces" / "openapi.json"
    written = generate_openapi(str(out))
    assert written == str(out)

    schema = json.loads(out.read_text(encoding="utf-8"))
    assert "/api/todos" in schema["paths"]
    assert "/api/todos/{todo_id}" in schema["paths"]
    assert set(schema["paths"]["/api/todos/{todo_id}"]) == {"put", "delete"}
    assert {t["name"] for t in schema["tags"]} >= {"health", "todos"}


def test_error_schema_documents_validation_detail(tmp_path):
    schema = json.loads(open(generate_openapi(str(tmp_path / "openapi.json")), encoding="utf-8").read())
    error_props = schema["components"]["schemas"]["ErrorResponse"]["properties"]
    assert set(error_props) == {"error", "detail"}
    assert set(schema["components"]["schemas"]["ErrorDetail"]["properties"]) == {"field", "message", "type"}
