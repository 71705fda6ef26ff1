class ErrorPagesException(Exception):
    pass


class TemplateExecutionError(ErrorPagesException):
    """The selected template failed to render.

    By the time this is raised the client has already been sent a 500 with
    the fallback text. The template error is kept as ``__cause__``.
    """


class ResponseWriteError(ErrorPagesException):
    """Writing the rendered page to the response failed"""
