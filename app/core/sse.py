"""Datastar request detection.

A Datastar client sends ``datastar-request: true`` on every request it issues;
those requests get an SSE stream of patches instead of a full document.
"""
from fastapi import Request

DATASTAR_REQUEST_HEADER = "datastar-request"


def is_datastar_request(request: Request) -> bool:
    return request.headers.get(DATASTAR_REQUEST_HEADER) == "true"
