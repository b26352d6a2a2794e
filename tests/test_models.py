"""Tests for API payload models."""

from __future__ import annotations

from grafana_sdk.models import Datasource, DatasourceType, StatusMessage


class TestDatasource:
    """Test Datasource aliases and payload rendering."""

    def test_defaults(self) -> None:
        ds = Datasource()
        assert ds.id == 0
        assert ds.org_id == 0
        assert ds.is_default is False
        assert ds.password is None

    def test_accepts_wire_names(self) -> None:
        ds = Datasource.model_validate({"orgId": 2, "typeLogoUrl": "logo.svg", "basicAuth": True})
        assert ds.org_id == 2
        assert ds.type_logo_url == "logo.svg"
        assert ds.basic_auth is True

    def test_accepts_attribute_names(self) -> None:
        ds = Datasource(org_id=3, basic_auth_user="reader")
        assert ds.org_id == 3
        assert ds.basic_auth_user == "reader"

    def test_payload_uses_wire_names(self) -> None:
        payload = Datasource(name="pg", org_id=1, is_default=True).to_payload()
        assert payload["orgId"] == 1
        assert payload["isDefault"] is True
        assert "org_id" not in payload

    def test_payload_omits_unset_credentials(self) -> None:
        payload = Datasource(name="pg").to_payload()
        for key in ("password", "user", "database", "basicAuth", "basicAuthUser", "basicAuthPassword"):
            assert key not in payload

    def test_payload_keeps_credentials_when_set(self) -> None:
        payload = Datasource(
            name="pg",
            basic_auth=True,
            basic_auth_user="u",
            secure_json_data={"basicAuthPassword": "p"},
        ).to_payload()
        assert payload["basicAuth"] is True
        assert payload["basicAuthUser"] == "u"
        assert payload["secureJsonData"] == {"basicAuthPassword": "p"}

    def test_unknown_fields_preserved(self) -> None:
        ds = Datasource.model_validate({"name": "x", "uid": "abc", "version": 4})
        payload = ds.to_payload()
        assert payload["uid"] == "abc"
        assert payload["version"] == 4

    def test_null_unknown_fields_kept(self) -> None:
        ds = Datasource.model_validate({"name": "x", "withCredentials": None, "uid": "u"})
        payload = ds.to_payload()
        assert "withCredentials" in payload
        assert payload["withCredentials"] is None
        assert payload["uid"] == "u"
        assert "password" not in payload


class TestDatasourceType:
    """Test DatasourceType parsing."""

    def test_partials_from_datasource_key(self) -> None:
        dt = DatasourceType.model_validate({"name": "Graphite", "datasource": {"query": "q.html"}})
        assert dt.partials.query == "q.html"

    def test_missing_fields_default(self) -> None:
        dt = DatasourceType.model_validate({"name": "Loki"})
        assert dt.metrics is False
        assert dt.partials.query == ""
        assert dt.plugin_type == ""


class TestStatusMessage:
    """Test StatusMessage parsing."""

    def test_all_optional(self) -> None:
        msg = StatusMessage.model_validate({})
        assert msg.id is None
        assert msg.message is None

    def test_full_envelope(self) -> None:
        msg = StatusMessage.model_validate_json(
            '{"id": 1, "orgId": 2, "message": "ok", "slug": "s", "version": 3,'
            ' "status": "success", "uid": "u", "url": "/d/u/s"}'
        )
        assert msg.org_id == 2
        assert msg.version == 3
        assert msg.url == "/d/u/s"
