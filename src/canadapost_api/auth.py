import base64

from requests.auth import AuthBase


def encode_api_key(api_key: str) -> str:
    """ Base64 of the UTF-8 bytes of the whole API key. """
    return base64.b64encode(api_key.encode('utf-8')).decode('ascii')


class ApiKeyAuth(AuthBase):

    def __init__(self, api_key: str):
        self.api_key = api_key

    def __call__(self, r):
        r.headers['Authorization'] = f"Basic {encode_api_key(self.api_key)}"
        return r
