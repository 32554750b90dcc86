"""Booking resource of the booking service.

Every method maps to exactly one HTTP call. Mutating calls need the token
from ``AuthApi.create_token``; it travels as ``Cookie: token=<token>``.
"""
from typing import Any, Mapping, Optional

from src.constants.api_constants import APIConstants
from src.helpers.api_requests_wrapper import ApiClient, ApiResponse
from src.helpers.utils import common_headers_accept_json, common_headers_json


class BookingApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def get_all(self, query: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """List booking ids, optionally filtered by firstname/lastname/checkin/checkout."""
        return self.client.get(APIConstants.url_get_all_bookings(), query=query)

    def get_by_id(self, booking_id) -> ApiResponse:
        return self.client.get(APIConstants.url_booking(booking_id),
                               headers=common_headers_accept_json())

    def create(self, booking: Mapping[str, Any]) -> ApiResponse:
        return self.client.post(APIConstants.url_create_booking(),
                                headers=common_headers_json(),
                                data=booking)

    def update(self, booking_id, booking: Mapping[str, Any], token: str) -> ApiResponse:
        return self.client.put(APIConstants.url_booking(booking_id),
                               headers=common_headers_json(),
                               data=booking,
                               cookie_token=token)

    def partial_update(self, booking_id, patch: Mapping[str, Any], token: str) -> ApiResponse:
        return self.client.patch(APIConstants.url_booking(booking_id),
                                 headers=common_headers_json(),
                                 data=patch,
                                 cookie_token=token)

    def delete(self, booking_id, token: str) -> ApiResponse:
        return self.client.delete(APIConstants.url_booking(booking_id), cookie_token=token)
