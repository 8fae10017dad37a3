import pytest
from fastapi.testclient import TestClient

from petclinic.app.core.config import JPA_PROFILE, MAP_PROFILE, Settings
from petclinic.app.main import create_app
from petclinic.app.services.registry import build_map_services, build_sql_services


@pytest.fixture
def database_url(tmp_path):
    return str(tmp_path / "petclinic-test.db")


@pytest.fixture(params=[MAP_PROFILE, JPA_PROFILE])
def services(request, database_url):
    """One set of services per storage profile."""
    if request.param == MAP_PROFILE:
        return build_map_services()
    return build_sql_services(database_url)


@pytest.fixture(params=[MAP_PROFILE, JPA_PROFILE])
def client(request, database_url):
    settings = Settings(
        active_profile=request.param,
        database_url=database_url,
        load_sample_data=False,
        log_level="WARNING",
    )
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
