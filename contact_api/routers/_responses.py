import logging
from fastapi.responses import JSONResponse

from contact_api.errors import ContactAPIError, StorageError

log = logging.getLogger(__name__)


def error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


def failed(path: str, exc: Exception) -> JSONResponse:
    """
    Log a failed insert and turn it into a 400 with the error text.
    Validation/config problems are the caller's fault and logged as warnings;
    storage and unexpected errors get a traceback.
    """
    if isinstance(exc, ContactAPIError) and not isinstance(exc, StorageError):
        log.warning("error in %s: %s", path, exc)
    else:
        log.exception("error in %s", path)
    return error(400, str(exc) or "internal error")
