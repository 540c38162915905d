import logging, sys

FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"

# Third-party loggers that drown ours at INFO
QUIET = ("uvicorn.access", "sqlalchemy.engine")


def setup_logging(level: str = "INFO", stream=sys.stdout):
    root = logging.getLogger()
    if root.handlers:  # uvicorn --reload imports us twice
        return
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(FORMAT))
    root.addHandler(handler)
    for name in QUIET:
        logging.getLogger(name).setLevel(logging.WARNING)
