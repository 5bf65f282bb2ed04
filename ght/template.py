"""
Template document loading.

A template reference is either an ``https://`` URL, fetched over the network,
or a path on the local filesystem. Pull request and issue template values may
use either form too, or hold the file text directly.
"""

import json
import os
from pathlib import Path

import httpx

from ght.exceptions import TemplateParseError, TemplateReadError, TransportError
from ght.logging import get_logger
from ght.types.config import DesiredConfig

REMOTE_PREFIX = "https://"
DEFAULT_TIMEOUT = 30.0

logger = get_logger("template")


def read_data(reference: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """
    Read the raw bytes behind a template reference.

    Args:
        reference: ``https://`` URL or local file path
        timeout: Timeout in seconds for remote fetches

    Raises:
        TransportError: If the URL could not be fetched at all
        TemplateReadError: If the file is unreadable or the URL answered with an error
    """
    if reference.startswith(REMOTE_PREFIX):
        logger.debug("fetching template from %s", reference)
        try:
            response = httpx.get(reference, timeout=timeout, follow_redirects=True)
        except httpx.RequestError as e:
            raise TransportError(f"failed to get url {reference}: {e}") from e

        if response.status_code >= 400:
            raise TemplateReadError(reference, f"HTTP {response.status_code}")
        return response.content

    logger.debug("reading template from %s", reference)
    try:
        return Path(reference).read_bytes()
    except OSError as e:
        raise TemplateReadError(reference, e.strerror or str(e)) from e


def read_content(value: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """
    Bytes to commit for a pull request or issue template value.

    An ``https://`` URL or the path of an existing local file is read through
    :func:`read_data`; any other value is the file text itself.
    """
    if value.startswith(REMOTE_PREFIX) or os.path.isfile(value):
        return read_data(value, timeout=timeout)
    return value.encode("utf-8")


def load_config(reference: str, timeout: float = DEFAULT_TIMEOUT) -> DesiredConfig:
    """
    Load and decode the desired configuration from a template reference.

    Raises:
        TransportError: If a remote template could not be fetched
        TemplateReadError: If the template could not be read
        TemplateParseError: If the template is not a valid configuration document
    """
    data = read_data(reference, timeout=timeout)

    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise TemplateParseError(f"failed to unmarshal json from {reference}: {e}") from e

    return DesiredConfig.from_dict(document)
