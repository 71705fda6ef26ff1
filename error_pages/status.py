from werkzeug.http import HTTP_STATUS_CODES


def status_text(code: int) -> str:
    """Returns the reason phrase for an HTTP status code, or "" if unknown"""
    return HTTP_STATUS_CODES.get(int(code), "")


class Status(int):
    """An HTTP status code.

    Behaves like the plain int it wraps, so ``str(status)`` is the decimal code
    and doubles as a template name. The reason phrase is available as ``text``:

        {{ status }} {{ status.text }} => 400 Bad Request
    """

    @property
    def text(self) -> str:
        return status_text(self)

    def __str__(self) -> str:
        return int.__repr__(self)

    def __repr__(self) -> str:
        return f"Status({int(self)})"
