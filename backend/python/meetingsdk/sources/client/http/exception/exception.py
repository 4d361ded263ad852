from meetingsdk.config.constants.http_status_code import HttpStatusCode


class HttpError(Exception):
    """Raised for a response outside the 2xx range"""

    def __init__(self, status: int, url: str, message: str = "", body_snippet: str = "") -> None:
        super().__init__(message or f"HTTP {status} for {url}")
        self.status = status
        self.url = url
        self.body_snippet = body_snippet


class BadRequestError(HttpError): pass            # 400
class UnauthorizedError(HttpError): pass          # 401
class ForbiddenError(HttpError): pass             # 403
class NotFoundError(HttpError): pass              # 404
class TooManyRequestsError(HttpError): pass       # 429
class ServerError(HttpError): pass                # 5xx


_STATUS_ERRORS = {
    HttpStatusCode.BAD_REQUEST.value: (BadRequestError, "Bad Request"),
    HttpStatusCode.UNAUTHORIZED.value: (UnauthorizedError, "Unauthorized"),
    HttpStatusCode.FORBIDDEN.value: (ForbiddenError, "Forbidden"),
    HttpStatusCode.NOT_FOUND.value: (NotFoundError, "Not Found"),
    HttpStatusCode.TOO_MANY_REQUESTS.value: (TooManyRequestsError, "Too Many Requests"),
}


def error_for_status(status: int, url: str, body_snippet: str = "") -> HttpError:
    """Map a non-2xx status to its typed error"""
    if status in _STATUS_ERRORS:
        error_cls, reason = _STATUS_ERRORS[status]
        return error_cls(status, url, f"HTTP {status} {reason} for {url}", body_snippet)
    if HttpStatusCode.INTERNAL_SERVER_ERROR.value <= status <= HttpStatusCode.NETWORK_AUTHENTICATION_REQUIRED.value:
        return ServerError(status, url, f"HTTP {status} Server error for {url}", body_snippet)
    return HttpError(status, url, body_snippet=body_snippet)
