import logging
from io import StringIO

import pytest
from msgspec.json import decode

from keywalk.config import DemoConfig, OutputConfig, set_config
from keywalk.demo import Demonstrator, Traversal
from keywalk.errors import UnknownSectionError


def test_default_run_writes_visited_keys(stream: StringIO):
    Demonstrator(DemoConfig(), stream).run()
    assert stream.getvalue().splitlines() == [
        "js",
        "cpp",
        "rb",
        "swift",
        "0",
        "1",
        "2",
        "3",
        "4",
        "IN",
        "USA",
        "Fr",
    ]


def test_traversals(stream: StringIO):
    traversals = Demonstrator(DemoConfig(), stream).traversals()
    assert [t.name for t in traversals] == [
        "record",
        "sequence",
        "map-own-keys",
        "map-keys",
    ]
    by_name = {t.name: t for t in traversals}
    assert by_name["record"].visited == ("js", "cpp", "rb", "swift")
    assert by_name["sequence"].visited == ("0", "1", "2", "3", "4")
    assert by_name["map-own-keys"].visited == ()
    assert by_name["map-own-keys"].mechanism == "own-keys"
    assert by_name["map-keys"].visited == ("IN", "USA", "Fr")
    assert by_name["map-keys"].mechanism == "iterator"
    assert stream.getvalue() == ""


def test_show_values(stream: StringIO):
    config = DemoConfig(output=OutputConfig(show_values=True))
    Demonstrator(config, stream).run()
    assert stream.getvalue().splitlines() == [
        "js shortcut is for javascript",
        "cpp shortcut is for C++",
        "rb shortcut is for ruby",
        "swift shortcut is for swift by apple",
        "js",
        "rb",
        "py",
        "java",
        "cpp",
        "IN: India",
        "USA: United States of America",
        "Fr: France",
    ]


def test_show_headers_marks_empty_traversal(stream: StringIO):
    config = DemoConfig(
        sections=("map-own-keys", "map-keys"),
        output=OutputConfig(show_headers=True),
    )
    Demonstrator(config, stream).run()
    assert stream.getvalue().splitlines() == [
        "# map-own-keys (own-keys)",
        "# map-keys (iterator)",
        "IN",
        "USA",
        "Fr",
    ]


def test_sections_select_and_order(stream: StringIO):
    config = DemoConfig(sections=("map-keys", "record"))
    Demonstrator(config, stream).run()
    assert stream.getvalue().splitlines() == [
        "IN",
        "USA",
        "Fr",
        "js",
        "cpp",
        "rb",
        "swift",
    ]


def test_json_output(stream: StringIO):
    config = DemoConfig(output=OutputConfig(format="json"))
    traversals = Demonstrator(config, stream).run()

    decoded = decode(stream.getvalue().encode(), type=list[Traversal])
    assert decoded == traversals
    assert decoded[3].visited == ("IN", "USA", "Fr")


def test_unknown_section(stream: StringIO):
    demo = Demonstrator(DemoConfig(), stream)
    with pytest.raises(UnknownSectionError):
        demo.traverse("bogus")  # type: ignore


def test_uses_registered_config(stream: StringIO):
    set_config(config=DemoConfig(sections=("sequence",)))
    Demonstrator(stream=stream).run()
    assert stream.getvalue() == "0\n1\n2\n3\n4\n"


def test_logs_each_traversal(stream: StringIO, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="keywalk"):
        Demonstrator(DemoConfig(), stream).run()
    assert "map-own-keys (own-keys) visited 0 keys" in caplog.text
    assert "map-keys (iterator) visited 3 keys" in caplog.text
