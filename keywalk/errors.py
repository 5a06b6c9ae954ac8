from typing import Any


class KeywalkError(Exception):
    __slots__ = ()
    ...


class NotIterableError(KeywalkError):
    "Raised when a collection does not expose the requested iterator accessor"

    def __init__(self, obj: Any, accessor: str):
        msg = f"{type(obj).__name__} object has no {accessor}() iterator accessor"
        super().__init__(msg)


class ConfigurationError(KeywalkError): ...


class ConfigFileNotFoundError(ConfigurationError):
    def __init__(self, path: Any):
        super().__init__(f"path {path} not exist")


class UnsupportedConfigTypeError(ConfigurationError):
    def __init__(self, file_ext: str):
        super().__init__(f"Not supported file type {file_ext!r}")


class UnknownSectionError(KeywalkError):
    def __init__(self, name: str, sections: tuple[str, ...]):
        super().__init__(f"Unknown section {name!r}, expected one of {sections}")
