import random
from datetime import date, timedelta

DATE_FORMAT = "%Y-%m-%d"


def payload_create_booking(**overrides):
    """Random but valid booking payload; any keyword given replaces the generated field."""
    n = random.randrange(999999)
    today = date.today()
    checkin = today + timedelta(days=1)
    checkout = today + timedelta(days=3)

    payload = {
        "firstname": f"John{n}",
        "lastname": f"Doe{n}",
        "totalprice": 100 + n % 300,
        "depositpaid": True,
        "bookingdates": {
            "checkin": checkin.strftime(DATE_FORMAT),
            "checkout": checkout.strftime(DATE_FORMAT),
        },
        "additionalneeds": "Breakfast",
    }
    # None keeps the generated value
    payload.update({key: value for key, value in overrides.items() if value is not None})
    return payload
