"""
Datasource management API.

One function per endpoint, each issuing exactly one request through the
shared ``Client``.  Every call takes ``org_id``; ``0`` means the caller's
current organization.

Reads (GET) require HTTP 200 and raise ``HTTPStatusError`` otherwise.
Writes (POST/PUT/DELETE) don't check the status: Grafana reports both
success and failure in a ``StatusMessage`` body, which is returned as-is.

API docs: https://grafana.com/docs/grafana/latest/developers/http_api/data_source/
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from pydantic import TypeAdapter

from grafana_sdk.errors import HTTPStatusError
from grafana_sdk.models import Datasource, DatasourceType, StatusMessage

if TYPE_CHECKING:
    from grafana_sdk.client import Client, RawResponse

logger = logging.getLogger(__name__)

DATASOURCES_PATH = "api/datasources"

_DATASOURCE_LIST = TypeAdapter(list[Datasource])
_DATASOURCE_TYPES = TypeAdapter(dict[str, DatasourceType])


# =============================================================================
# Helpers
# =============================================================================


def _by_id(datasource_id: int) -> str:
    return f"{DATASOURCES_PATH}/{datasource_id}"


def _by_name(name: str) -> str:
    return f"{DATASOURCES_PATH}/name/{quote(name, safe='')}"


def _expect_ok(resp: RawResponse, path: str) -> bytes:
    """Return the body of a 200 response, else raise ``HTTPStatusError``."""
    if resp.status_code != 200:
        logger.warning("GET %s returned HTTP %d", path, resp.status_code)
        raise HTTPStatusError(resp.status_code, resp.text)
    return resp.body


def _is_null(body: bytes) -> bool:
    """A JSON ``null`` body, which reads as an empty collection."""
    return body.strip() == b"null"


def _encode(ds: Datasource) -> bytes:
    return json.dumps(ds.to_payload()).encode()


def _coerce(ds: Datasource | Mapping[str, Any]) -> Datasource:
    return ds if isinstance(ds, Datasource) else Datasource.model_validate(ds)


# =============================================================================
# Reads
# =============================================================================


def get_all_datasources(client: Client, org_id: int = 0) -> list[Datasource]:
    """GET /api/datasources - all datasources of the organization."""
    resp = client.get(DATASOURCES_PATH, None, org_id)
    body = _expect_ok(resp, DATASOURCES_PATH)
    if _is_null(body):
        return []
    return _DATASOURCE_LIST.validate_json(body)


def get_datasource(client: Client, datasource_id: int, org_id: int = 0) -> Datasource:
    """GET /api/datasources/:id - a single datasource by ID."""
    path = _by_id(datasource_id)
    resp = client.get(path, None, org_id)
    return Datasource.model_validate_json(_expect_ok(resp, path))


def get_datasource_by_name(client: Client, name: str, org_id: int = 0) -> Datasource:
    """GET /api/datasources/name/:name - a single datasource by name."""
    path = _by_name(name)
    resp = client.get(path, None, org_id)
    return Datasource.model_validate_json(_expect_ok(resp, path))


def get_datasource_types(client: Client, org_id: int = 0) -> dict[str, DatasourceType]:
    """GET /api/datasources/plugins - available datasource plugins, keyed by name."""
    path = f"{DATASOURCES_PATH}/plugins"
    resp = client.get(path, None, org_id)
    body = _expect_ok(resp, path)
    if _is_null(body):
        return {}
    return _DATASOURCE_TYPES.validate_json(body)


# =============================================================================
# Writes
# =============================================================================


def create_datasource(
    client: Client, ds: Datasource | Mapping[str, Any], org_id: int = 0
) -> StatusMessage:
    """
    POST /api/datasources - create a new datasource.

    ``ds`` may be a ``Datasource`` or a mapping in either wire (camelCase)
    or attribute (snake_case) spelling.  A mapping that fails validation
    raises ``pydantic.ValidationError`` before anything is sent.
    """
    body = _encode(_coerce(ds))
    resp = client.post(DATASOURCES_PATH, None, body, org_id)
    return StatusMessage.model_validate_json(resp.body)


def update_datasource(
    client: Client, ds: Datasource | Mapping[str, Any], org_id: int = 0
) -> StatusMessage:
    """PUT /api/datasources/:id - replace the datasource identified by ``ds.id``."""
    ds = _coerce(ds)
    resp = client.put(_by_id(ds.id), None, _encode(ds), org_id)
    return StatusMessage.model_validate_json(resp.body)


def delete_datasource(client: Client, datasource_id: int, org_id: int = 0) -> StatusMessage:
    """DELETE /api/datasources/:id - delete a datasource by ID."""
    resp = client.delete(_by_id(datasource_id), org_id)
    return StatusMessage.model_validate_json(resp.body)


def delete_datasource_by_name(client: Client, name: str, org_id: int = 0) -> StatusMessage:
    """DELETE /api/datasources/name/:name - delete a datasource by name."""
    resp = client.delete(_by_name(name), org_id)
    return StatusMessage.model_validate_json(resp.body)
