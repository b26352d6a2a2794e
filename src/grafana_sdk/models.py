"""
Pydantic models for Grafana API payloads.

Attributes are snake_case; the camelCase wire names are declared as aliases,
so models accept either spelling on input and serialize with ``by_alias``.
Unknown fields returned by the server are preserved, which lets a fetched
record be sent back on update without dropping anything.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_WIRE_CONFIG = ConfigDict(populate_by_name=True, extra="allow")

# Optional Datasource fields left out of request bodies while None
_OMIT_WHEN_UNSET = (
    "password",
    "user",
    "database",
    "basicAuth",
    "basicAuthUser",
    "basicAuthPassword",
)


# =============================================================================
# Datasources
# =============================================================================


class Datasource(BaseModel):
    """A configured data source, scoped to an organization."""

    model_config = _WIRE_CONFIG

    id: int = 0
    org_id: int = Field(default=0, alias="orgId")
    name: str = ""
    type: str = ""
    type_logo_url: str = Field(default="", alias="typeLogoUrl")
    access: str = ""  # "proxy" or "direct"
    url: str = ""
    password: str | None = None
    user: str | None = None
    database: str | None = None
    basic_auth: bool | None = Field(default=None, alias="basicAuth")
    basic_auth_user: str | None = Field(default=None, alias="basicAuthUser")
    basic_auth_password: str | None = Field(default=None, alias="basicAuthPassword")
    is_default: bool = Field(default=False, alias="isDefault")
    json_data: Any = Field(default=None, alias="jsonData")
    secure_json_data: Any = Field(default=None, alias="secureJsonData")

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready request body; unset credential fields are left out."""
        payload: dict[str, Any] = self.model_dump(mode="json", by_alias=True)
        for key in _OMIT_WHEN_UNSET:
            if payload.get(key, ...) is None:
                del payload[key]
        return payload


class DatasourcePartials(BaseModel):
    """Frontend partials of a datasource plugin."""

    model_config = _WIRE_CONFIG

    query: str = ""


class DatasourceType(BaseModel):
    """An installed datasource plugin."""

    model_config = _WIRE_CONFIG

    metrics: bool = False
    module: str = ""
    name: str = ""
    partials: DatasourcePartials = Field(default_factory=DatasourcePartials, alias="datasource")
    plugin_type: str = Field(default="", alias="pluginType")
    service_name: str = Field(default="", alias="serviceName")
    type: str = ""


# =============================================================================
# Generic
# =============================================================================


class StatusMessage(BaseModel):
    """Result envelope returned by mutating calls. Any field may be absent."""

    model_config = _WIRE_CONFIG

    id: int | None = None
    org_id: int | None = Field(default=None, alias="orgId")
    message: str | None = None
    slug: str | None = None
    version: int | None = None
    status: str | None = None
    uid: str | None = None
    url: str | None = None
