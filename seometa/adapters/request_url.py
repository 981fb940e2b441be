from fastapi import Request


class StaticUrlProvider:
    def __init__(self, url: str | None) -> None:
        self._url = url

    def full_url(self) -> str | None:
        return self._url


class RequestUrlProvider:
    """Current URL of an incoming FastAPI request, query string included."""

    def __init__(self, request: Request) -> None:
        self._request = request

    def full_url(self) -> str | None:
        return str(self._request.url)
