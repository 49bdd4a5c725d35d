import pytest

from apps.exoplanets import data_loader
from apps.exoplanets.models import Exoplanet

pytestmark = pytest.mark.django_db


def test_random_exoplanets_are_inserted_once():
    assert data_loader.insert_random_exoplanets(count=25, seed=7) == 25
    assert data_loader.insert_random_exoplanets(count=30, seed=7) == 5

    assert Exoplanet.objects.count() == 30
    sample = Exoplanet.objects.get(name="ExoTest-3")
    assert sample.image_url == "https://picsum.photos/seed/exotest3/200"
    assert 50 <= sample.temperature <= 500
    assert 1995 <= sample.year_discovered <= 2022
    assert sample.orbital_period_years == pytest.approx(sample.orbital_period_days / 365)


def test_habitable_samples_are_habitable():
    assert data_loader.insert_habitable_exoplanets(seed=1) == 12

    assert Exoplanet.objects.potentially_habitable().count() == 12
    teegarden = Exoplanet.objects.by_name("teegarden's star b")
    assert teegarden.image_url == "https://picsum.photos/seed/TeegardensStarb/200"


def test_data_loader_endpoints(admin_api_client, user_client):
    assert user_client.post("/api/admin/data-loader/insert-500-exoplanets").status_code == 403

    response = admin_api_client.post("/api/admin/data-loader/insert-500-exoplanets")
    assert response.status_code == 200
    assert response.data["inserted"] == 500

    response = admin_api_client.post("/api/admin/data-loader/insert-habitable-exoplanets")
    assert response.data["inserted"] == 12
    assert Exoplanet.objects.count() == 512

    response = admin_api_client.delete("/api/admin/data-loader/clear-exoplanets")
    assert response.status_code == 200
    assert response.data["deleted"] == 512
    assert not Exoplanet.objects.exists()


def test_queryset_helpers(make_exoplanet):
    make_exoplanet("Small", radius=0.9, temperature=200.0, year_discovered=2016)
    make_exoplanet("Big", radius=11.0, temperature=900.0, year_discovered=2016)
    make_exoplanet("Mid", radius=1.2, temperature=310.0, year_discovered=2019)

    assert set(Exoplanet.objects.earth_sized().values_list("name", flat=True)) == {"Small", "Mid"}
    assert Exoplanet.objects.discovered_in(2016).count() == 2
    assert Exoplanet.objects.count_in_temperature_range(190, 320) == 2
    assert Exoplanet.objects.by_name("BIG").name == "Big"
    assert Exoplanet.objects.by_name("nothing") is None
