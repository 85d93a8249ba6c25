"""Client-side auditing through a ``requests`` response hook.

Useful in integration tests: the session plays the browser, and every
response that answers a request carrying an Origin header is analyzed.
"""

from typing import Optional

import requests

from .doctor import CorsDoctor


def _response_headers(response: requests.Response):
    # urllib3 keeps repeated headers apart; response.headers folds them.
    raw_headers = getattr(response.raw, "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "getlist"):
        return raw_headers
    return response.headers


def make_response_hook(doctor: CorsDoctor):
    """Hook for ``session.hooks["response"]`` that audits each response."""

    def audit_response(response: requests.Response, *args, **kwargs) -> None:
        prepared = response.request
        if prepared is None:
            return None
        req_info = doctor.inspect_request(prepared.method, prepared.path_url, prepared.headers)
        if req_info is None:
            return None
        doctor.audit_response(req_info, _response_headers(response), response.status_code)
        return None

    return audit_response


def attach(session: requests.Session, doctor: Optional[CorsDoctor] = None) -> CorsDoctor:
    """Audit every response *session* receives. Returns the doctor in use."""
    doctor = doctor or CorsDoctor()
    session.hooks["response"].append(make_response_hook(doctor))
    return doctor
