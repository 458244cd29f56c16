import logging, json, sys, time, os

ROOT_LOGGER = "regcode"


def get_logger(name=ROOT_LOGGER, level=None, to_file=None):
    """
    Unified structured logger for all regcode components.

    Handlers live on the package logger only; module loggers such as
    ``regcode.codec`` propagate to it. Records go to stderr so that stdout
    stays reserved for the codes and keys the CLI prints.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        if root.level == logging.NOTSET:
            root.setLevel(logging.WARNING)
        root.addHandler(_make_handler(logging.StreamHandler(sys.stderr)))

    if to_file and not any(isinstance(h, logging.FileHandler) for h in root.handlers):
        # Ensure the directory exists before writing
        os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
        root.addHandler(_make_handler(logging.FileHandler(to_file)))

    return logger


def _make_handler(handler):
    formatter = logging.Formatter(
        fmt=json.dumps({
            "ts": "%(asctime)s",
            "level": "%(levelname)s",
            "name": "%(name)s",
            "msg": "%(message)s"
        }),
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    formatter.converter = time.gmtime  # Use UTC timestamps
    handler.setFormatter(formatter)
    return handler
