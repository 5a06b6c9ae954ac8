from typing import Any

from msgspec import NODEFAULT, Struct
from msgspec.structs import asdict as struct_asdict
from msgspec.structs import fields as struct_fields
from msgspec.structs import replace as struct_replace
from typing_extensions import Self, dataclass_transform


def field_default(data: Struct, name: str) -> Any:
    for finfo in struct_fields(data):
        if finfo.name != name:
            continue
        if finfo.default is not NODEFAULT:
            return finfo.default
        if finfo.default_factory is not NODEFAULT:
            return finfo.default_factory()
    return NODEFAULT


class Base(Struct):
    "Base Model for all internal struct, with Mapping interface implemented"

    def keys(self) -> tuple[str, ...]:
        return self.__struct_fields__

    def __iter__(self):
        return iter(self.__struct_fields__)

    def __len__(self) -> int:
        return len(self.__struct_fields__)

    def __getitem__(self, key: str) -> Any:
        return getattr(self, key)

    def asdict(self, skip_defaults: bool = False) -> dict[str, Any]:
        if not skip_defaults:
            return struct_asdict(self)

        vals: dict[str, Any] = {}
        for fname in self.__struct_fields__:
            val = getattr(self, fname)
            if val != field_default(self, fname):
                vals[fname] = val
        return vals

    def replace(self, /, **changes: Any) -> Self:
        return struct_replace(self, **changes)


@dataclass_transform(frozen_default=True)
class Payload(Base, frozen=True, gc=False):
    """
    a pre-configured struct that is frozen, gc_free
    """
