from functools import lru_cache
from typing import Any, Callable

from msgspec.json import Encoder as JsonEncoder

from keywalk.interface import OutputFormat

IEncoder = Callable[[Any], bytes]


def _enc_hook(obj: Any) -> Any:
    # KeySequence and other lazy iterables are written out as arrays
    try:
        return list(obj)
    except TypeError:
        raise NotImplementedError(f"Cannot encode object of type {type(obj)}")


@lru_cache(16)
def encoder_factory(content_type: OutputFormat = "json") -> IEncoder:
    if content_type == "text":
        return encode_text
    return JsonEncoder(enc_hook=_enc_hook).encode


def encode_text(content: Any) -> bytes:
    if isinstance(content, bytes):
        return content
    if isinstance(content, str):
        return content.encode()
    return "\n".join(map(str, content)).encode()
