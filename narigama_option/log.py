import sys

from loguru import logger

from .config import Config


PACKAGE = "narigama_option"

# the stderr handler loguru installs on import, it passes every record at DEBUG
DEFAULT_HANDLER = 0


def install(config: Config | None = None) -> int | None:
    """Enable or silence narigama_option's logs according to `config`.

    When enabled a stderr sink is added that only carries this package's
    records at `config.log_level`, its id is returned so it can be passed to
    `logger.remove` later. Loguru's default handler is swapped for one that
    carries everything except this package, otherwise it would repeat the
    package's records regardless of level.
    """
    config = config or Config()

    if not config.log_enabled:
        logger.disable(PACKAGE)
        return None

    try:
        logger.remove(DEFAULT_HANDLER)
    except ValueError:
        # already removed, either by the application or an earlier install
        pass
    else:
        logger.add(sys.stderr, filter={PACKAGE: False})

    logger.enable(PACKAGE)
    return logger.add(sys.stderr, level=config.log_level, filter=PACKAGE)
