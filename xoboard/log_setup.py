import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def init_logging(level=logging.WARNING, filename=None):
    # level may be a name ("DEBUG") or a logging constant
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {name}")
    logging.basicConfig(filename=filename, level=level, format=LOG_FORMAT)
