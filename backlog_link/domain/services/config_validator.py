"""
Config Validator - Advisory checks for the project link form.

The checks never block saving: a value that fails here is still stored
verbatim if the user submits it.
"""

import re
from typing import Annotated, Optional

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

from backlog_link.domain import messages
from backlog_link.domain.value_objects import FormValidation


USER_ID_PATTERN = re.compile(r"[A-Za-z0-9\-_@.]+")

URL_SCHEMES = ["http", "https", "ftp"]

_url_adapter = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(host_required=True, allowed_schemes=URL_SCHEMES)]
)


def check_url(url: Optional[str], locale: str = messages.DEFAULT_LOCALE) -> FormValidation:
    """
    Check that the URL is syntactically valid.

    Args:
        url: URL typed into the form.
        locale: Locale of the returned message.

    Returns:
        OK, or ERROR when the value is not an http, https or ftp URL
        with a host.
    """
    try:
        _url_adapter.validate_python(url)
    except ValidationError:
        return FormValidation.error(messages.URL_INVALID, locale)
    return FormValidation.ok()


def check_user_id(user_id: Optional[str], locale: str = messages.DEFAULT_LOCALE) -> FormValidation:
    """Check that the user id is empty or uses only the allowed characters."""
    if not user_id or USER_ID_PATTERN.fullmatch(user_id):
        return FormValidation.ok()
    return FormValidation.error(messages.USER_ID_INVALID, locale)
