from src.constants.api_constants import APIConstants
from src.helpers.api_requests_wrapper import ApiClient, ApiResponse
from src.helpers.utils import common_headers_json


class AuthApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def create_token(self, username: str, password: str) -> ApiResponse:
        # restful-booker answers 200 with {"reason": "Bad credentials"} on a wrong password
        return self.client.post(APIConstants.url_create_token(),
                                headers=common_headers_json(),
                                data={"username": username, "password": password})
