from typing import Any, Literal

from msgspec import Struct as Struct

from keywalk.interface.struct import Base as Base
from keywalk.interface.struct import Payload as Payload

StrDict = dict[str, Any]

Mechanism = Literal["own-keys", "iterator"]
SectionName = Literal["record", "sequence", "map-own-keys", "map-keys"]
OutputFormat = Literal["text", "json"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
