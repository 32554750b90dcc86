import pytest

from src.helpers.payload_manager import payload_create_booking
from src.helpers.common_verification import verify_ok, verify_response_key_should_not_be_none, \
    verify_http_status_code, verify_response_time

pytestmark = pytest.mark.e2e


class TestCreateBooking():
    @pytest.mark.smoke
    def test_create_booking_tc1(self, booking_api, created_booking_ids):
        booking = payload_create_booking()
        response = booking_api.create(booking)

        verify_http_status_code(response, 200)
        booking_id = response.field("bookingid")
        verify_response_key_should_not_be_none(booking_id)
        created_booking_ids.append(booking_id)
        assert response.field("booking") == booking

    def test_create_booking_then_get_tc2(self, booking_api, created_booking_ids):
        booking = payload_create_booking(additionalneeds="Dinner")
        response = booking_api.create(booking)
        verify_ok(response)
        created_booking_ids.append(response.field("bookingid"))

        get_response = booking_api.get_by_id(response.field("bookingid"))
        verify_ok(get_response)
        assert get_response.field("firstname") == booking["firstname"]
        assert get_response.field("additionalneeds") == "Dinner"

    def test_create_booking_response_time_tc3(self, booking_api, created_booking_ids):
        response = booking_api.create(payload_create_booking())
        verify_ok(response)
        created_booking_ids.append(response.field("bookingid"))
        verify_response_time(response, 10000)
        assert response.duration_ms >= 0
