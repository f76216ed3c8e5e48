import structlog
from flask import jsonify, request

log = structlog.get_logger(__name__)


def error_message(exc: BaseException) -> str:
    """Return the human readable message of `exc`.

    This is the exception's first argument if it is a string, which avoids
    the quoting :class:`KeyError` applies in its :meth:`__str__`.
    """
    if exc.args and isinstance(exc.args[0], str):
        return exc.args[0]
    return str(exc) or exc.__class__.__name__


def handle_exception(exc: Exception):
    """Answer any exception raised in a view with `500` and ``{"error": <message>}``.

    Invalid requests and failed ledger calls are answered alike.
    """
    message = error_message(exc)
    log.error(
        "Request failed", method=request.method, path=request.path, error=message, exc_info=exc
    )
    return jsonify({"error": message}), 500
