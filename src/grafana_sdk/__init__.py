"""grafana-sdk - Python client for the Grafana HTTP management API.

Architecture::

    client.py        HTTP transport (base URL, auth headers, org scoping)
    datasources.py   Datasource CRUD + plugin discovery, one request per call
    models.py        Pydantic models for API payloads
    errors.py        Exception types
    config.py        Environment-backed settings
    services/        Shared utilities (session factory)
    cli.py           ``grafana-sdk`` command line

Example::

    from grafana_sdk import Client, datasources

    with Client("http://localhost:3000", auth="admin:admin") as client:
        for ds in datasources.get_all_datasources(client, org_id=1):
            print(ds.id, ds.name)
"""

__version__ = "0.1.0"

from grafana_sdk import datasources
from grafana_sdk.client import Client, RawResponse
from grafana_sdk.config import Settings
from grafana_sdk.errors import GrafanaError, HTTPStatusError
from grafana_sdk.models import Datasource, DatasourceType, StatusMessage

__all__ = [
    "Client",
    "Datasource",
    "DatasourceType",
    "GrafanaError",
    "HTTPStatusError",
    "RawResponse",
    "Settings",
    "StatusMessage",
    "__version__",
    "datasources",
]
