"""
Request helpers for reading submitted form state safely.

Pages never read ``request.form`` directly: the submission is nested once
into a payload and parsed into a FormState that is passed down explicitly.
"""
from typing import Any, Dict

from flask import request

from data_table import FormState, to_payload
from logging_helper import LoggingHelper


def get_real_ip() -> str:
    """
    Get real client IP address, accounting for reverse proxies.

    When behind a reverse proxy, request.remote_addr returns the proxy's IP,
    not the client's real IP. This function checks X-Forwarded-For first.

    Returns:
        Real client IP address as string

    Security Notes:
        - X-Forwarded-For can be spoofed by malicious clients
        - Only use the result for logging, never for access decisions
    """
    # X-Forwarded-For format: "client, proxy1, proxy2"
    forwarded_for = request.headers.get('X-Forwarded-For')

    if forwarded_for:
        return forwarded_for.split(',')[0].strip()

    return request.remote_addr


def get_submitted_payload() -> Dict[str, Any]:
    """
    Nest the query string and form body of the current request.

    Form fields win over query parameters with the same name.

    Returns:
        Nested payload, e.g. ``{'cities': {'sort': {'city': 'asc'}}}``
    """
    payload = to_payload(request.args)
    for name, value in to_payload(request.form).items():
        if isinstance(value, dict) and isinstance(payload.get(name), dict):
            _merge(payload[name], value)
        else:
            payload[name] = value
    return payload


def _merge(target: dict, source: dict) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


def get_form_state(form_name: str) -> FormState:
    """
    Build the FormState of ``form_name`` from the current request.

    Args:
        form_name: Name of the form whose section of the payload is read

    Returns:
        Read-only FormState snapshot for this request
    """
    state = FormState(form_name, get_submitted_payload())

    flags = []
    if state.only_display_form:
        flags.append('display only')
    if state.only_validate:
        flags.append('validate only')
    if state.reset:
        flags.append('reset')
    details = f"{request.method} from {get_real_ip()}"
    if flags:
        details += f" ({', '.join(flags)})"
    LoggingHelper.log_request(form_name, details)

    return state
