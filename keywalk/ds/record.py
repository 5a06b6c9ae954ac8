from types import SimpleNamespace
from typing import Any, Mapping


class Record(SimpleNamespace):
    """
    A key/value record whose entries are stored as own instance attributes.

    ```python
    langs = Record(js="javascript", cpp="C++")
    langs["js"]    # "javascript"
    vars(langs)    # {"js": "javascript", "cpp": "C++"}
    ```

    Keys need not be valid identifiers, `Record({"c#": "C sharp"})` works and
    is read back with `record["c#"]`.
    """

    def __init__(self, entries: Mapping[str, Any] | None = None, /, **kwargs: Any):
        super().__init__(**{**(entries or {}), **kwargs})

    def __getitem__(self, key: str) -> Any:
        try:
            return vars(self)[key]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: str, value: Any) -> None:
        setattr(self, key, value)

    def __contains__(self, key: object) -> bool:
        return key in vars(self)
