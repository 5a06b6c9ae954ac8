import logging
import sys
from typing import Any, Callable, TextIO

from keywalk.config import ALL_SECTIONS, DemoConfig, get_config
from keywalk.ds import AssociativeMap, Record
from keywalk.errors import UnknownSectionError
from keywalk.interface import Mechanism, Payload, SectionName
from keywalk.traversal import KeySequence, enumerate_own_keys, iterate_keys
from keywalk.utils.json import encoder_factory

logger = logging.getLogger("keywalk")


def build_record() -> Record:
    return Record(js="javascript", cpp="C++", rb="ruby", swift="swift by apple")


def build_sequence() -> list[str]:
    return ["js", "rb", "py", "java", "cpp"]


def build_map() -> AssociativeMap[str, str]:
    countries: AssociativeMap[str, str] = AssociativeMap()
    countries.set("IN", "India")
    countries.set("USA", "United States of America")
    countries.set("Fr", "France")
    countries.set("IN", "India")
    return countries


class Traversal(Payload, kw_only=True):
    name: SectionName
    mechanism: Mechanism
    visited: tuple[str, ...]
    lines: tuple[str, ...]


LineFormatter = Callable[[str], str]


class Demonstrator:
    """
    Walks the demo containers with both mechanisms and writes what each one
    visits to `stream`, one line per visited key.

    ```python
    Demonstrator().run()
    ```
    writes

    ```
    js
    cpp
    rb
    swift
    0
    1
    2
    3
    4
    IN
    USA
    Fr
    ```
    the map enumerated by own keys contributes nothing.
    """

    def __init__(
        self, config: DemoConfig | None = None, stream: TextIO | None = None
    ):
        self.config = config if config is not None else get_config()
        self.stream = stream if stream is not None else sys.stdout
        self.record = build_record()
        self.sequence = build_sequence()
        self.countries = build_map()

    def _section(
        self, name: SectionName
    ) -> tuple[Mechanism, KeySequence[Any], LineFormatter]:
        match name:
            case "record":
                record = self.record
                return (
                    "own-keys",
                    enumerate_own_keys(record),
                    lambda key: f"{key} shortcut is for {record[key]}",
                )
            case "sequence":
                sequence = self.sequence
                return (
                    "own-keys",
                    enumerate_own_keys(sequence),
                    lambda key: str(sequence[int(key)]),
                )
            case "map-own-keys":
                countries = self.countries
                return (
                    "own-keys",
                    enumerate_own_keys(countries),
                    lambda key: f"{key}: {countries[key]}",
                )
            case "map-keys":
                countries = self.countries
                return (
                    "iterator",
                    iterate_keys(countries),
                    lambda key: f"{key}: {countries[key]}",
                )
            case _:
                raise UnknownSectionError(name, ALL_SECTIONS)

    def traverse(self, name: SectionName) -> Traversal:
        mechanism, keys, fmt = self._section(name)
        visited = tuple(str(key) for key in keys)
        if self.config.output.show_values:
            lines = tuple(fmt(key) for key in visited)
        else:
            lines = visited
        logger.debug("%s (%s) visited %d keys", name, mechanism, len(visited))
        return Traversal(
            name=name, mechanism=mechanism, visited=visited, lines=lines
        )

    def traversals(self) -> list[Traversal]:
        return [self.traverse(name) for name in self.config.sections]

    def write(self, traversals: list[Traversal]) -> None:
        output = self.config.output
        encode = encoder_factory(output.format)
        if output.format == "json":
            self.stream.write(encode(traversals).decode() + "\n")
            return

        for traversal in traversals:
            lines = list(traversal.lines)
            if output.show_headers:
                lines.insert(0, f"# {traversal.name} ({traversal.mechanism})")
            if lines:
                self.stream.write(encode(lines).decode() + "\n")

    def run(self) -> list[Traversal]:
        traversals = self.traversals()
        self.write(traversals)
        return traversals
