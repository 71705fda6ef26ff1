from typing import TYPE_CHECKING, Callable, Dict, Iterable, List

from flask import request
from werkzeug.exceptions import HTTPException, default_exceptions
from werkzeug.wrappers import Response

if TYPE_CHECKING:
    from .pages import Pages


def default_codes() -> List[int]:
    return sorted(code for code in default_exceptions if code >= 400)


def _define_custom_error_page(pages: "Pages", code: int) -> Callable[[HTTPException], Response]:
    def _handler(err: HTTPException) -> Response:
        data = pages.data_factory(request, err.code or code, err.description or "")
        return pages.make_response(data)

    return _handler


def define_error_pages(pages: "Pages", codes: Iterable[int]) -> Dict[int, Callable[[HTTPException], Response]]:
    errors = {}
    for code in codes:
        errors[code] = _define_custom_error_page(pages, code)
    return errors
