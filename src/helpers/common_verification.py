# HTTP Status verification
from src.helpers.utils import truncate


def verify_ok(response_data):
    assert response_data.ok, (
        f"Expected ok=true but got ok=false (status {response_data.status}). "
        f"Body: {truncate(response_data.body_text)}"
    )


def verify_http_status_code(response_data, expect_data):
    assert response_data.status == expect_data, (
        f"Expected status {expect_data} but got {response_data.status}. "
        f"Body: {truncate(response_data.body_text)}"
    )


def verify_response_key_should_not_be_none(key):
    assert key is not None, "Expected a value, got None"


def verify_response_time(response_data, max_ms):
    assert response_data.duration_ms <= max_ms, (
        f"Expected duration <= {max_ms}ms but got {response_data.duration_ms}ms "
        f"(status {response_data.status}). Body: {truncate(response_data.body_text)}"
    )
