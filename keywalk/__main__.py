import logging

from keywalk.config import get_config
from keywalk.demo import Demonstrator, logger
from keywalk.interface import LogLevel


def configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    config = get_config()
    configure_logging(config.log_level)
    logger.debug("running with %s", config.asdict(skip_defaults=True))
    Demonstrator(config).run()


if __name__ == "__main__":
    main()
