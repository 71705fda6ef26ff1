from typing import Any, Callable, Dict, Optional

import logbook
from flask import Flask
from jinja2 import Template
from werkzeug.wrappers import Response

from .buffers import BufferPool
from .config import load_config
from .data import Data, Provider
from .errors import default_codes, define_error_pages
from .exceptions import ResponseWriteError, TemplateExecutionError
from .selector import TemplateSet, select_template
from .sinks import ResponseSink, WerkzeugResponseSink

logger = logbook.Logger(__name__)

# Sent to the client instead of the page if the template failed to render.
# Not pretty, but it prevents partial responses.
RENDER_ERROR = "500 Internal server error. While handling:\n{}"

DataFactory = Callable[[Any, int, str], Provider]


def _template_context(data: Provider) -> Dict[str, Any]:
    return {
        "error": data,
        "request": data.request,
        "status": data.status,
        "message": data.message,
    }


class Pages:
    """Status page templates.

    Whenever a page needs to be served, a template named by the code (eg.
    "404") is looked up in `templates`. A generic template named "error" is
    used if there is no status specific one. If `templates` is None, or
    neither is found, the built-in placeholder template is rendered.

    Can also be used as a Flask extension, see `init_app()`.
    """

    def __init__(self, app: Optional[Flask] = None, templates: Optional[TemplateSet] = None, *,
                 prefix: Optional[str] = None, suffix: Optional[str] = None,
                 pool: Optional[BufferPool] = None, data_factory: DataFactory = Data):
        self.templates = templates
        self.prefix = prefix
        self.suffix = suffix
        self.pool = pool if pool is not None else BufferPool()
        self.data_factory = data_factory
        self.app = app

        if app is not None:
            self.init_app(app)

    def template(self, status_code: int) -> Template:
        return select_template(self.templates, status_code, self.prefix or "", self.suffix or "")

    def render(self, sink: ResponseSink, data: Provider) -> None:
        """Render the page for `data.status` into `sink`.

        `data` is passed to the template as ``error``, along with its
        ``request``, ``status`` and ``message``.

        If the template fails, status 500 and `RENDER_ERROR` (including the
        original status and message) are sent instead and
        `TemplateExecutionError` is raised. `ResponseWriteError` is raised if
        the page could not be written to `sink`.
        """
        with self.pool.acquire() as buf:
            try:
                buf.writelines(self.template(data.status).generate(_template_context(data)))
            except Exception as e:
                try:
                    sink.set_status(500)
                    sink.write(RENDER_ERROR.format(data).encode("utf-8"))
                except Exception:
                    logger.exception("Could not send fallback error page for {}", data)

                raise TemplateExecutionError(f"error_pages render template: {e}") from e

            try:
                sink.set_status(data.status)
                sink.write(buf.getvalue().encode("utf-8"))
            except OSError as e:
                raise ResponseWriteError(f"error_pages render, write to client: {e}") from e

    def make_response(self, data: Provider) -> Response:
        """Renders into a new response object.

        Template errors are logged; the response then carries the fallback text.
        """
        sink = WerkzeugResponseSink()
        try:
            self.render(sink, data)
        except TemplateExecutionError:
            logger.exception("Failed rendering error page for {}", data)
        return sink.response

    def init_app(self, app: Flask) -> "Pages":
        """Serves error pages for the app's HTTP errors.

        Configuration is read with `load_config()`. Without templates of its
        own, the app's Jinja environment is searched for "errors/<code>.html"
        and "errors/error.html".

        An instance created with `app` is configured for that app; otherwise
        the settings go to a per-app copy in ``app.extensions["error_pages"]``.
        """
        config = load_config(app.config)

        templates = self.templates
        if templates is None and config["ERROR_PAGES_USE_APP_TEMPLATES"]:
            templates = app.jinja_env

        prefix = self.prefix if self.prefix is not None else config["ERROR_PAGES_TEMPLATE_PREFIX"]
        suffix = self.suffix if self.suffix is not None else config["ERROR_PAGES_TEMPLATE_SUFFIX"]
        pool = BufferPool(config["ERROR_PAGES_BUFFER_POOL_SIZE"])

        if app is self.app:
            self.templates, self.prefix, self.suffix, self.pool = templates, prefix, suffix, pool
            app_pages = self
        else:
            app_pages = Pages(templates=templates, prefix=prefix, suffix=suffix, pool=pool,
                              data_factory=self.data_factory)

        codes = config["ERROR_PAGES_CODES"]
        if codes is None:
            codes = default_codes()

        errors = define_error_pages(app_pages, codes)
        for code in errors:
            app.errorhandler(code)(errors[code])

        app.extensions["error_pages"] = app_pages
        logger.debug("Registered error pages for {}", sorted(errors))
        return app_pages
