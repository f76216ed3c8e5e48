"""Allow the relay to be called from browser front-ends on any origin.

Preflight ``OPTIONS`` requests are answered by flask's automatic options
handling; this blueprint only attaches the CORS headers to every response.
"""
from flask import Blueprint, Response

cors_blueprint = Blueprint("cors_view", __name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,HEAD,PUT,PATCH,POST,DELETE",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


@cors_blueprint.after_app_request
def add_cors_headers(response: Response) -> Response:
    for header, value in CORS_HEADERS.items():
        response.headers.setdefault(header, value)
    return response
