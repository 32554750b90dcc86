# Endpoint paths of the booking service, relative to BASE_URL


class APIConstants:
    PING = "/ping"
    AUTH = "/auth"
    BOOKING = "/booking"

    @staticmethod
    def url_ping():
        return APIConstants.PING

    @staticmethod
    def url_create_token():
        return APIConstants.AUTH

    @staticmethod
    def url_create_booking():
        return APIConstants.BOOKING

    @staticmethod
    def url_get_all_bookings():
        return APIConstants.BOOKING

    @staticmethod
    def url_booking(booking_id):
        # GET / PUT / PATCH / DELETE share the same path
        return f"{APIConstants.BOOKING}/{booking_id}"
