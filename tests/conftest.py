import pytest

from src.config.env import load_env
from src.fixtures.api_context import TokenAcquisitionError, build_api_context, delete_bookings, obtain_token

CI_WORKERS = 2


def pytest_xdist_auto_num_workers(config):
    # constrained under CI, otherwise let xdist count CPUs
    if load_env().ci:
        return CI_WORKERS
    return None


@pytest.fixture
def env():
    return load_env()


@pytest.fixture
def api_context(env):
    context = build_api_context(env)
    yield context
    context.close()


@pytest.fixture
def api_client(api_context):
    return api_context.client


@pytest.fixture
def auth_api(api_context):
    return api_context.auth_api


@pytest.fixture
def booking_api(api_context):
    return api_context.booking_api


@pytest.fixture
def token(auth_api, env):
    try:
        return obtain_token(auth_api, env)
    except TokenAcquisitionError as exc:
        pytest.fail(str(exc), pytrace=False)


@pytest.fixture
def created_booking_ids(api_context):
    """Ids appended here are deleted once the test is done."""
    booking_ids = []
    yield booking_ids
    delete_bookings(api_context, booking_ids)
