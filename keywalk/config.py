import tomllib
from pathlib import Path
from typing import Annotated, Any, TypeVar, cast, get_args

from msgspec import ValidationError, convert, field
from typing_extensions import Doc

from keywalk.errors import (
    ConfigFileNotFoundError,
    ConfigurationError,
    UnsupportedConfigTypeError,
)
from keywalk.interface import (
    Base,
    LogLevel,
    OutputFormat,
    SectionName,
    StrDict,
)

ALL_SECTIONS: tuple[SectionName, ...] = get_args(SectionName)


def deep_update(original: StrDict, update_data: StrDict) -> StrDict:
    "Merge `update_data` into `original` in place, recursing into shared tables."
    for key, value in update_data.items():
        if (
            key in original
            and isinstance(original[key], dict)
            and isinstance(value, dict)
        ):
            deep_update(original[key], cast(Any, value))
        else:
            original[key] = value
    return original


class ConfigBase(Base, forbid_unknown_fields=True, frozen=True): ...


class OutputConfig(ConfigBase):
    format: Annotated[OutputFormat, Doc("Write plain lines or a JSON document")] = (
        "text"
    )
    show_values: Annotated[
        bool, Doc("Write the value visited alongside each key")
    ] = False
    show_headers: Annotated[
        bool, Doc("Precede each traversal with a `# name (mechanism)` line")
    ] = False


class DemoConfig(ConfigBase):
    sections: Annotated[
        tuple[SectionName, ...], Doc("Traversals to run, in this order")
    ] = ALL_SECTIONS
    log_level: Annotated[LogLevel, Doc("Level of the `keywalk` logger")] = (
        "WARNING"
    )
    output: Annotated[OutputConfig, Doc("Diagnostic output settings")] = field(
        default_factory=OutputConfig
    )

    @classmethod
    def from_toml(cls, file_path: Path) -> StrDict:
        with open(file_path, "rb") as fp:
            toml = tomllib.load(fp)

        try:
            keywalk_config: StrDict = toml["tool"]["keywalk"]
        except KeyError:
            try:
                keywalk_config = toml["keywalk"]
            except KeyError:
                raise ConfigurationError(
                    f"can't find table keywalk from {file_path}"
                )
        return keywalk_config


def read_config_file(file_path: Path, config_type: type[DemoConfig]) -> StrDict:
    if not file_path.exists():
        raise ConfigFileNotFoundError(file_path)

    file_ext = file_path.suffix[1:]
    if file_ext != "toml":
        raise UnsupportedConfigTypeError(file_ext)
    return config_type.from_toml(file_path)


TConfig = TypeVar("TConfig", bound=DemoConfig)


def config_from_file(
    *config_files: Path | str, config_type: type[TConfig] = DemoConfig
) -> TConfig:
    "Later files override earlier ones, nested tables are merged."
    if not config_files:
        return config_type()  # everything default

    config_dict: StrDict = {}
    for config_file in config_files:
        file_path = Path(config_file) if isinstance(config_file, str) else config_file
        deep_update(config_dict, read_config_file(file_path, config_type))

    try:
        return convert(config_dict, config_type)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config: {exc}") from exc


DEFAULT_CONFIG = DemoConfig()


def config_registry():
    _config: DemoConfig = DEFAULT_CONFIG

    def _set_config(
        *config_files: str | Path, config: DemoConfig | None = None
    ) -> DemoConfig:
        """
        Set the current configuration, either from `config` or from `config_files`.
        Calling it with neither resets to `DEFAULT_CONFIG`.
        """
        if config_files and config:
            raise ConfigurationError(
                "Can't set both config_files and config, choose either one of them"
            )

        nonlocal _config
        if config is not None:
            _config = config
        elif config_files:
            _config = config_from_file(*config_files)
        else:
            _config = DEFAULT_CONFIG
        return _config

    def _get_config() -> DemoConfig:
        return _config

    return _set_config, _get_config


set_config, get_config = config_registry()
