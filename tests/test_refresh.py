import http.client
import json
import socket
import urllib.error
from unittest import mock

import pytest

from apps.common.exceptions import ExternalServiceError
from apps.exoplanets import services
from apps.exoplanets.clients import ExternalExoplanet, ExternalExoplanetClient
from apps.exoplanets.models import Exoplanet

pytestmark = pytest.mark.django_db

ARCHIVE_ROWS = [
    {"pl_name": "Kepler-186 f", "avg_rade": 1.17, "avg_mass": 1.71, "avg_dist": 0.43, "avg_period": 129.9, "avg_temp": 188},
    {"pl_name": "TRAPPIST-1 e", "avg_rade": 0.92, "avg_mass": 0.69, "avg_dist": 0.03, "avg_period": 6.1, "avg_temp": 250},
    {"pl_name": "Unnamed-1", "avg_rade": None, "avg_mass": None, "avg_dist": None, "avg_period": None, "avg_temp": None},
    {"pl_name": None, "avg_rade": 1.0},
]


def fake_urlopen(payload: bytes):
    response = mock.MagicMock()
    response.__enter__.return_value.read.return_value = payload
    return mock.Mock(return_value=response)


def test_client_parses_archive_rows():
    with mock.patch("urllib.request.urlopen", fake_urlopen(json.dumps(ARCHIVE_ROWS).encode())):
        records = ExternalExoplanetClient(url="https://archive.test/tap").fetch_exoplanet_data()

    assert [record.name for record in records] == ["Kepler-186 f", "TRAPPIST-1 e", "Unnamed-1"]
    assert records[0] == ExternalExoplanet("Kepler-186 f", 1.17, 1.71, 0.43, 129.9, 188.0)
    assert records[2].radius is None


@pytest.mark.parametrize(
    "urlopen",
    [
        mock.Mock(side_effect=urllib.error.URLError("down")),
        mock.Mock(side_effect=socket.timeout("slow")),
        fake_urlopen(b"<html>maintenance</html>"),
        fake_urlopen(b'{"error": "query timeout"}'),
        fake_urlopen(b'["Kepler-186 f"]'),
        fake_urlopen(b"\x80\x81"),
        mock.Mock(side_effect=ConnectionResetError("reset")),
        mock.Mock(side_effect=http.client.IncompleteRead(b"[{")),
    ],
)
def test_client_failures_become_bad_gateway(urlopen):
    with mock.patch("urllib.request.urlopen", urlopen), pytest.raises(ExternalServiceError):
        ExternalExoplanetClient(url="https://archive.test/tap").fetch_exoplanet_data()


def test_refresh_upserts_by_case_insensitive_name(make_exoplanet):
    existing = make_exoplanet("KEPLER-186 F", image_url="https://example.com/mine.png", temperature=1.0)
    client = mock.Mock()
    client.fetch_exoplanet_data.return_value = [ExternalExoplanet.from_row(row) for row in ARCHIVE_ROWS[:3]]

    counts = services.refresh_exoplanet_data(client)

    assert counts == {"created": 2, "updated": 1}
    existing.refresh_from_db()
    assert existing.name == "KEPLER-186 F"
    assert existing.temperature == 188.0
    assert existing.image_url == "https://example.com/mine.png"
    assert existing.orbital_period_years == pytest.approx(129.9 / 365)

    trappist = Exoplanet.objects.get(name="TRAPPIST-1 e")
    assert trappist.image_url  # from the bundled image catalog
    assert Exoplanet.objects.get(name="Unnamed-1").image_url is None


def test_refresh_endpoint(admin_api_client):
    with mock.patch("apps.exoplanets.services.ExternalExoplanetClient") as client_cls:
        client_cls.return_value.fetch_exoplanet_data.return_value = [
            ExternalExoplanet.from_row(ARCHIVE_ROWS[1])
        ]
        response = admin_api_client.post("/api/exoplanets/refresh")

    assert response.status_code == 200
    assert response.data["created"] == 1
    assert response.data["updated"] == 0
    assert Exoplanet.objects.filter(name="TRAPPIST-1 e").exists()


def test_refresh_endpoint_upstream_failure(admin_api_client):
    with mock.patch("apps.exoplanets.services.ExternalExoplanetClient") as client_cls:
        client_cls.return_value.fetch_exoplanet_data.side_effect = ExternalServiceError()
        response = admin_api_client.post("/api/exoplanets/refresh")

    assert response.status_code == 502
    assert response.data["error"] == "Bad Gateway"
