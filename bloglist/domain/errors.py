"""Domain exceptions raised by the blog service and mapped to HTTP in main.py."""


class BlogError(Exception):
    """Base class for blog domain errors."""

    status_code = 500
    detail = "Blog error"

    def __init__(self, detail: str | None = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class MalformedIdError(BlogError):
    status_code = 400
    detail = "malformatted id"


class BlogNotFoundError(BlogError):
    status_code = 404
    detail = "Blog not found"
