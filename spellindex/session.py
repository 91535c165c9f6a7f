# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""HTTP session used to download word lists"""
from __future__ import annotations

from requests import adapters, models, Session
from requests.structures import CaseInsensitiveDict
from typing import Any, Final

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

# seconds; word lists are plain text files of a few megabytes at most
DEFAULT_REQUEST_TIMEOUT: Final = 30.0


class TimeoutAdapter(adapters.HTTPAdapter):
    """Applies `timeout` to every request that doesn't set its own"""

    def __init__(self, *args: Any, timeout: float = DEFAULT_REQUEST_TIMEOUT, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, request: models.PreparedRequest, *args: Any, **kwargs: Any) -> models.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, *args, **kwargs)


def get_requests_session(*, timeout: float | None = None) -> Session:
    """Session for fetching word lists over http(s), DEFAULT_REQUEST_TIMEOUT applies when `timeout` is None"""
    adapter = TimeoutAdapter(timeout=DEFAULT_REQUEST_TIMEOUT if timeout is None else timeout)

    session = Session()
    for prefix in ("http://", "https://"):
        session.mount(prefix, adapter)
    session.headers = CaseInsensitiveDict(
        {
            "accept": "text/plain",
            "user-agent": "spellindex/{}".format(__version__),
        }
    )
    return session
