# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Word frequency lists from local files or HTTP(S) URLs"""
from __future__ import annotations

from .dictionary import Dictionary, Error
from .session import get_requests_session
from requests import Session
from typing import Iterable, Iterator, NamedTuple
from urllib.parse import urlparse

import logging

log = logging.getLogger("spellindex.loader")


class WordListError(Error):
    """Malformed word list entry"""

    def __init__(self, source: str, line_number: int, message: str) -> None:
        super().__init__("{}:{}: {}".format(source, line_number, message))
        self.source = source
        self.line_number = line_number


class Entry(NamedTuple):
    word: str
    count: int | None = None


def parse_word_list(lines: Iterable[str], source: str = "<input>") -> Iterator[Entry]:
    """
    Parse `word` or `word count` lines.

    Blank lines and lines starting with `#` are skipped. Counts must be
    non-negative integers.
    """
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        if len(parts) == 1:
            yield Entry(parts[0])
        elif len(parts) == 2:
            try:
                count = int(parts[1])
            except ValueError as ex:
                raise WordListError(source, line_number, "invalid count {!r}".format(parts[1])) from ex
            if count < 0:
                raise WordListError(source, line_number, "negative count {!r}".format(parts[1]))
            yield Entry(parts[0], count)
        else:
            raise WordListError(source, line_number, "expected 'word' or 'word count', got {!r}".format(line))


def is_url(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def read_source(source: str, session: Session | None = None, timeout: float | None = None) -> str:
    if is_url(source):
        session = session or get_requests_session(timeout=timeout)
        log.debug("fetching word list %r", source)
        response = session.get(source)
        response.raise_for_status()
        return response.text

    with open(source, "rb") as fp:
        raw = fp.read()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as ex:
        line_number = raw[: ex.start].count(b"\n") + 1
        raise WordListError(source, line_number, "word list is not valid UTF-8: {}".format(ex.reason)) from ex


def load_entries(dictionary: Dictionary, entries: Iterable[Entry]) -> int:
    loaded = 0
    for entry in entries:
        if entry.count is None:
            dictionary.insert_with_permutations(entry.word)
        else:
            dictionary.insert_with_permutations_and_count(entry.word, entry.count)
        loaded += 1
    return loaded


def load_word_list(
    dictionary: Dictionary,
    source: str,
    session: Session | None = None,
    timeout: float | None = None,
) -> int:
    """Insert every entry of the word list at `source` into `dictionary`, return the number of entries"""
    text = read_source(source, session=session, timeout=timeout)
    loaded = load_entries(dictionary, parse_word_list(text.splitlines(), source=source))
    log.debug("loaded %d entries from %r, %d words known", loaded, source, len(dictionary))
    return loaded
