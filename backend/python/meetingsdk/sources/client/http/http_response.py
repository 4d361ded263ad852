from typing import Any

import httpx  # type: ignore

from meetingsdk.config.constants.http_status_code import HttpStatusCode
from meetingsdk.sources.client.http.exception.exception import error_for_status

BODY_SNIPPET_LENGTH = 400


class HTTPResponse:
    """Thin wrapper over an httpx response"""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    @property
    def url(self) -> str:
        return str(self.response.request.url)

    def is_success(self) -> bool:
        return HttpStatusCode.OK.value <= self.status < HttpStatusCode.MULTIPLE_CHOICES.value

    def text(self) -> str:
        return self.response.text

    def json(self) -> Any:
        return self.response.json()

    def raise_for_status(self) -> "HTTPResponse":
        """Raise the typed HttpError for a non-2xx status, else return self"""
        if not self.is_success():
            raise error_for_status(self.status, self.url, self.text()[:BODY_SNIPPET_LENGTH])
        return self
