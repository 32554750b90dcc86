"""Per-test dependency graph: config -> client -> domain APIs -> token."""
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from src.apis.auth_api import AuthApi
from src.apis.booking_api import BookingApi
from src.config.env import EnvConfig
from src.helpers.api_requests_wrapper import ApiClient
from src.helpers.utils import truncate

logger = logging.getLogger(__name__)


class TokenAcquisitionError(RuntimeError):
    """The auth endpoint did not hand out a token."""


@dataclass
class ApiContext:
    env: EnvConfig
    client: ApiClient
    auth_api: AuthApi
    booking_api: BookingApi

    def close(self):
        self.client.close()


def build_api_context(env: EnvConfig, session: Optional[requests.Session] = None) -> ApiContext:
    client = ApiClient(env.base_url, session=session)
    return ApiContext(
        env=env,
        client=client,
        auth_api=AuthApi(client),
        booking_api=BookingApi(client),
    )


def obtain_token(auth_api: AuthApi, env: EnvConfig) -> str:
    resp = auth_api.create_token(env.username, env.password)
    token = resp.field("token")
    if not resp.ok or not token:
        raise TokenAcquisitionError(
            f"Token missing. Status={resp.status} Body={truncate(resp.body_text)}"
        )
    logger.debug("Obtained auth token for %s", env.username)
    return token


def delete_bookings(context: ApiContext, booking_ids) -> None:
    """Remove bookings a test created; ones already gone are left alone."""
    if not booking_ids:
        return

    token = obtain_token(context.auth_api, context.env)
    for booking_id in booking_ids:
        response = context.booking_api.delete(booking_id, token)
        # 405 when the test already deleted it
        if response.status not in (201, 405):
            logger.warning("Could not delete booking %s: status %s", booking_id, response.status)
