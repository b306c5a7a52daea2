"""
Form field route tests

Test classes:
    TestFieldTypeRoutes     — field type listing
    TestTableRoutes         — normalize / validate / export
    TestDropdownRoutes      — rendered options
    TestSubfieldRoutes      — composite validation
    TestErrorResponses      — error envelope for configuration faults
"""

from __future__ import annotations


class TestFieldTypeRoutes:
    def test_list_types(self, client):
        response = client.get("/api/v1/fields/types")
        assert response.status_code == 200
        types = {item["type_name"]: item for item in response.json()}
        assert types["table"]["display_name"] == "Table"
        assert types["subfields"]["has_sub_fields"] is True

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestTableRoutes:
    def test_normalize(self, client, contacts_settings):
        response = client.post(
            "/api/v1/tables/normalize",
            json={
                "field": contacts_settings,
                "value": {"0": {"col1": " Ann ", "col2": "ann@example.com"}, "__ROW__": {"col1": ""}},
            },
        )
        assert response.status_code == 200
        rows = response.json()["rows"]
        assert len(rows) == 1
        assert rows[0]["col1"] == rows[0]["name"] == "Ann"
        assert response.json()["serialized"].startswith("[{")

    def test_normalize_fresh_defaults(self, client, contacts_settings):
        contacts_settings["defaults"] = [{"col1": "Default"}]
        response = client.post("/api/v1/tables/normalize", json={"field": contacts_settings, "fresh": True})
        assert response.json()["rows"][0]["name"] == "Default"

    def test_validate_ok(self, client, contacts_settings):
        response = client.post(
            "/api/v1/tables/validate",
            json={"field": contacts_settings, "value": [{"col1": "Ann"}, {"col1": "Bob"}]},
        )
        assert response.status_code == 200
        assert response.json()["valid"] is True

    def test_validate_too_few_rows(self, client, contacts_settings):
        response = client.post(
            "/api/v1/tables/validate",
            json={"field": contacts_settings, "value": [{"col1": "Ann", "col2": "not-an-email"}]},
        )
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["error_code"] == "VALIDATION_FAILED"
        assert error["details"]["errors"]["field"] == ["Field should contain at least 2 rows."]
        assert error["details"]["errors"]["cells"] == [
            {"row": 0, "column": "col2", "message": "not-an-email is not a valid email address."}
        ]

    def test_validate_translated(self, client, contacts_settings):
        response = client.post(
            "/api/v1/tables/validate",
            json={"field": contacts_settings, "value": [{"col1": "Ann"}]},
            headers={"Accept-Language": "fr-FR,fr;q=0.9"},
        )
        assert response.status_code == 422
        assert response.json()["error"]["details"]["errors"]["field"] == ["Field doit contenir au moins 2 lignes."]
        assert response.headers["Content-Language"] == "fr"

    def test_export(self, client, contacts_settings):
        response = client.post(
            "/api/v1/tables/export",
            json={"field": contacts_settings, "value": [{"col1": "Ann", "col2": "ann@example.com"}], "include_csv": True},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["mapping"] == {"Field: 1: Name": "Ann", "Field: 1: Email": "ann@example.com"}
        assert body["display"] == "Ann, ann@example.com"
        assert body["headers"] == ["Name", "Email"]
        assert body["markup"].startswith("<table>")
        assert body["csv"].splitlines()[0] == "Name,Email"

    def test_export_without_csv(self, client, contacts_settings):
        response = client.post("/api/v1/tables/export", json={"field": contacts_settings, "value": []})
        assert response.json()["csv"] is None


class TestDropdownRoutes:
    def test_options_with_placeholder(self, client):
        response = client.post(
            "/api/v1/dropdowns/options",
            json={"field": {"placeholder": "Pick one", "options": [{"label": "A", "value": "a", "isDefault": True}]}},
        )
        assert response.status_code == 200
        body = response.json()
        assert [option["value"] for option in body["options"]] == ["", "a"]
        assert body["default"] == "a"

    def test_default_options(self, client):
        response = client.post("/api/v1/dropdowns/options", json={"field": {}})
        assert response.json()["options"][0]["label"] == "Select an option"


class TestSubfieldRoutes:
    SETTINGS = {
        "handle": "name",
        "label": "Name",
        "subfields": [{"handle": "firstName", "label": "First Name", "fieldType": "name-first", "required": True}],
    }

    def test_valid(self, client):
        response = client.post("/api/v1/subfields/validate", json={"field": self.SETTINGS, "value": {"firstName": "Ann"}})
        assert response.status_code == 200
        assert response.json()["value"] == {"firstName": "Ann"}

    def test_blank_required(self, client):
        response = client.post("/api/v1/subfields/validate", json={"field": self.SETTINGS, "value": {}})
        assert response.status_code == 422
        errors = response.json()["error"]["details"]["errors"]
        assert errors["subfields"] == {"name.firstName": '"First Name" cannot be blank.'}


class TestErrorResponses:
    def test_invalid_table_settings(self, client):
        response = client.post(
            "/api/v1/tables/normalize",
            json={"field": {"columns": [{"id": "c", "handle": "a"}, {"id": "c", "handle": "b"}]}},
        )
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["error_code"] == "FIELD_CONFIGURATION_INVALID"
        assert error["type"] == "Bad Request"

    def test_unknown_subfield_type(self, client):
        response = client.post(
            "/api/v1/subfields/validate",
            json={"field": {"subfields": [{"handle": "x", "fieldType": "matrix"}]}},
        )
        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "FIELD_TYPE_UNKNOWN"

    def test_malformed_body(self, client):
        response = client.post("/api/v1/tables/normalize", json={"field": "not a mapping"})
        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Validation error"

    def test_unknown_route(self, client):
        response = client.get("/api/v1/nope")
        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "RESOURCE_NOT_FOUND"
