import http.client
import itertools
import os
from dataclasses import dataclass

import flask
from flask import abort
from logbook.compat import redirect_logging

from .data import Data
from .pages import Pages

_request_ids = itertools.count(1)


@dataclass(frozen=True)
class RequestData(Data):
    req_id: int = 0


def _request_data(req, code, msg):
    return RequestData(req, code, msg, req_id=next(_request_ids))


def create_app(config=None):
    if config is None:
        config = {}

    ROOT_DIR = os.path.abspath(os.path.dirname(__file__))

    app = flask.Flask(__name__, template_folder=os.path.join(ROOT_DIR, "templates"))
    app.config.update(config)

    del app.logger.handlers[:]
    redirect_logging()

    Pages(app, data_factory=_request_data)

    @app.route("/")
    def index():
        return "OK"

    @app.route("/db")
    def db():
        abort(http.client.INTERNAL_SERVER_ERROR, "DB connection")

    @app.route("/token")
    def token():
        abort(http.client.BAD_REQUEST, "Missing token in URL")

    return app
