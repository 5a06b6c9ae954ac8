from keywalk.traversal import KeySequence
from keywalk.utils.json import encode_text, encoder_factory


def test_encoder_factory_is_cached():
    assert encoder_factory("json") is encoder_factory("json")
    assert encoder_factory("text") is encode_text


def test_json_encoder_writes_lazy_sequences():
    encode = encoder_factory("json")
    keys = KeySequence(lambda: iter(["IN", "USA", "Fr"]))
    assert encode({"keys": keys}) == b'{"keys":["IN","USA","Fr"]}'


def test_encode_text():
    assert encode_text(b"raw") == b"raw"
    assert encode_text("js") == b"js"
    assert encode_text(["js", "rb"]) == b"js\nrb"
    assert encode_text([]) == b""
