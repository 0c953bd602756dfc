"""
Response formatting helper utilities.

Provides the three kinds of answer a data form page gives: the full page,
the bare form fragment for an asynchronous refresh, and the (possibly
empty) list of messages for a validate-only request.
"""
import html
from typing import Iterable, Optional, Tuple

from flask import Response, make_response, render_template

from data_table import DataForm, FormState


def form_response(form: DataForm, state: FormState, title: str,
                  intro: Optional[str] = None) -> Response:
    """
    Render a data form as a full page, or as a bare fragment when asked.

    Args:
        form: The form to render
        state: State of the current request
        title: Page title
        intro: Optional plain text shown above the form

    Returns:
        HTML response. A display-only request gets just the ``<form>``
        element, which the client swaps in place of the old one.

    Raises:
        StructuralRenderError: If a table's rows are malformed
    """
    if state.only_display_form:
        response = make_response(form.display_form(state))
        response.mimetype = 'text/html'
        return response

    content = form.display(state)
    return make_response(render_template(
        'data_form_page.html',
        title=title,
        intro=intro,
        content=content
    ))


def validation_response(messages: Iterable[str]) -> Tuple[Response, int]:
    """
    Answer a validate-only request.

    An empty body tells the client the form is valid and may be submitted;
    anything else is shown in the form's flash region.

    Args:
        messages: Validation messages (plain text)

    Returns:
        Tuple of (Response, 200)

    Examples:
        >>> validation_response([])
        # Returns an empty body
        >>> validation_response(['Select at least one city'])
        # Returns "<ul class='validation-errors'><li>Select at least one city</li></ul>"
    """
    messages = list(messages)
    body = ''
    if messages:
        items = ''.join(f"<li>{html.escape(message)}</li>" for message in messages)
        body = f"<ul class='validation-errors'>{items}</ul>"

    response = make_response(body)
    response.mimetype = 'text/html'
    return response, 200


def error_page(error: Exception, status_code: int = 500) -> Tuple[Response, int]:
    """
    Create a diagnostic page for a failed render.

    Args:
        error: The exception that stopped the render
        status_code: HTTP status code (default: 500)

    Returns:
        Tuple of (Response, status_code)
    """
    body = (
        "<h1>Unable to display this page</h1>"
        f"<pre class='data-table-error'>{html.escape(str(error))}</pre>"
    )
    response = make_response(body)
    response.mimetype = 'text/html'
    return response, status_code
