import abc
from dataclasses import dataclass
from typing import Any, Optional

from .status import Status


def summary(provider: "Provider") -> str:
    """Status code, status text and message in a single string.

    For example, in a template:
        {{ error }} => 400 Bad Request: Parsing form data
    """
    status = provider.status
    return f"{int(status)} {status.text}: {provider.message}"


class Provider(abc.ABC):
    """Everything a template needs to know about the failed request.

    Implement this to expose a custom object to the templates; the instance
    itself is available to them as ``error``.
    """

    @property
    @abc.abstractmethod
    def request(self) -> Any:
        raise NotImplementedError()  # pragma: no cover

    @property
    @abc.abstractmethod
    def status(self) -> Status:
        raise NotImplementedError()  # pragma: no cover

    @property
    @abc.abstractmethod
    def message(self) -> str:
        raise NotImplementedError()  # pragma: no cover

    def __str__(self) -> str:
        return summary(self)


@dataclass(frozen=True)
class Data(Provider):
    """Default `Provider`.

    Subclass it (as a frozen dataclass) to carry more fields to the templates:

        @dataclass(frozen=True)
        class RequestData(Data):
            req_id: int = 0
    """

    req: Optional[Any] = None
    code: int = 0
    msg: str = ""
    data: Optional[Any] = None

    @property
    def request(self) -> Any:
        return self.req

    @property
    def status(self) -> Status:
        return Status(self.code)

    @property
    def message(self) -> str:
        return self.msg
