from .buffers import BufferPool
from .data import Data, Provider, summary
from .exceptions import ErrorPagesException, ResponseWriteError, TemplateExecutionError
from .pages import RENDER_ERROR, Pages
from .selector import DEFAULT_TEMPLATE, default_template, select_template
from .sinks import RequestHandlerSink, ResponseSink, WerkzeugResponseSink
from .status import Status, status_text

__version__ = "0.1.0"
