# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, envdefault, loader, permutations
from .argx import arg
from .dictionary import DEFAULT_ERROR_DISTANCE, DEFAULT_FALLBACK_ROUNDS, Dictionary
from argparse import ArgumentParser
from typing import Callable, Iterator, TextIO

import sys

WORD_COLUMNS = ["word", "score"]
FOUND_MESSAGE = "Did you mean {}?"
NOT_FOUND_MESSAGE = "Not found :("


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise ValueError(value)
    return number


class SpellIndexCLI(argx.CommandLineTool):
    dictionary: Dictionary

    def __init__(self) -> None:
        super().__init__("spellindex")

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--dictionary",
            action="append",
            metavar="SOURCE",
            help="word list file or http(s) URL with 'word count' lines, may be repeated",
        )
        parser.add_argument("--error-distance", type=non_negative_int, help="maximum deletions indexed per word")
        parser.add_argument("--fallback-rounds", type=non_negative_int, help="query expansion rounds when nothing matches")
        parser.add_argument("--request-timeout", type=float, help="timeout for fetching word lists over HTTP")

    def _dictionary_sources(self) -> list[str]:
        if self.args.dictionary:
            return self.args.dictionary
        sources = self.config.get("dictionaries")
        if sources is None:
            return [envdefault.SPELLINDEX_DICTIONARY] if envdefault.SPELLINDEX_DICTIONARY else []
        if not isinstance(sources, list) or not all(isinstance(source, str) for source in sources):
            raise argx.UserError("Invalid 'dictionaries' in configuration file: expected a list of strings")
        return sources

    def pre_run(self, func: Callable[[], int | None]) -> None:
        error_distance = self.args.error_distance
        if error_distance is None:
            error_distance = self.config.get_int("error_distance", DEFAULT_ERROR_DISTANCE)
        fallback_rounds = self.args.fallback_rounds
        if fallback_rounds is None:
            fallback_rounds = self.config.get_int("fallback_rounds", DEFAULT_FALLBACK_ROUNDS)
        timeout = self.args.request_timeout
        if timeout is None:
            timeout = self.config.get_number("request_timeout")

        self.dictionary = Dictionary(error_distance=error_distance, fallback_rounds=fallback_rounds)
        for source in self._dictionary_sources():
            try:
                loaded = loader.load_word_list(self.dictionary, source, timeout=timeout)
            except OSError as ex:
                raise argx.UserError("Failed to read word list {!r}: {}".format(source, ex)) from ex
            self.log.debug("loaded %d entries from %r", loaded, source)

    def _render_check(self, query: str) -> str:
        match = self.dictionary.check(query)
        return FOUND_MESSAGE.format(match) if match is not None else NOT_FOUND_MESSAGE

    @arg("query", nargs="+", help="text to correct")
    @arg("--json", action="store_true", help="print results as JSON")
    def check(self) -> None:
        """Correct the spelling of one or more queries"""
        if self.args.json:
            result = [{"query": query, "match": self.dictionary.check(query)} for query in self.args.query]
            self.print_response(result, json=True)
            return
        for query in self.args.query:
            print(self._render_check(query))

    @arg("query", help="text to correct")
    @arg("--limit", type=non_negative_int, help="maximum number of suggestions")
    @arg("--json", action="store_true", help="print results as JSON")
    def suggest(self) -> None:
        """List known words reachable from the query, best first"""
        found = self.dictionary.suggestions(self.args.query, limit=self.args.limit)
        self.print_response([word.to_dict() for word in found], json=self.args.json, table_layout=WORD_COLUMNS)

    @arg("word", help="word to generate deletion variants of")
    @arg("--distance", type=non_negative_int, help="maximum deletions, defaults to the index error distance")
    def variants(self) -> None:
        """Print the deletion variants of a word"""
        distance = self.args.distance if self.args.distance is not None else self.dictionary.error_distance
        for variant in sorted(permutations.variants(self.args.word, distance), key=lambda text: (-len(text), text)):
            print(variant)

    @arg("--limit", type=non_negative_int, help="maximum number of words")
    @arg("--json", action="store_true", help="print results as JSON")
    def words(self) -> None:
        """List loaded words, most frequent first"""
        known = self.dictionary.words()
        if self.args.limit is not None:
            known = known[: self.args.limit]
        self.print_response([word.to_dict() for word in known], json=self.args.json, table_layout=WORD_COLUMNS)

    @arg()
    def repl(self) -> None:
        """Read commands from standard input: 'add' registers a word, any other line is checked"""
        self.run_repl(sys.stdin, sys.stdout)

    def run_repl(self, stdin: TextIO, stdout: TextIO) -> None:
        lines: Iterator[str] = iter(stdin)
        for command in lines:
            command = command.strip()
            if command != "add":
                print(self._render_check(command), file=stdout)
                continue

            print("word? ", file=stdout)
            word = next(lines, None)
            print("value? ", file=stdout)
            value = next(lines, None)
            if word is None or value is None:
                break
            try:
                count = non_negative_int(value.strip())
            except ValueError:
                self.log.error("not a number: %r", value.strip())
                continue
            self.dictionary.insert_with_permutations_and_count(word.strip(), count)


if __name__ == "__main__":
    SpellIndexCLI().main()
