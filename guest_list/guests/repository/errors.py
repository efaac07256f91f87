import httpx

from guest_list.guests.dtos import ErrorKind, GuestApiError


def api_error_from_httpx(exc: httpx.HTTPError) -> GuestApiError:
    """Translate an httpx failure into a GuestApiError."""
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        if status_code == 404:
            kind = ErrorKind.NOT_FOUND
        elif 400 <= status_code < 500:
            kind = ErrorKind.INVALID
        else:
            kind = ErrorKind.SERVER
        return GuestApiError(kind, f"HTTP {status_code}: {exc.response.text}", status_code)
    return GuestApiError(ErrorKind.NETWORK, str(exc) or exc.__class__.__name__)
