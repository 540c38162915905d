import logging
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contact_api.errors import ConfigError, StorageError
from .base import SchemaEntry
from .types import Record

log = logging.getLogger(__name__)


def execute(db: Session, schema: SchemaEntry, normalized: Record) -> int:
    """
    Run the schema's INSERT with values bound as parameters, commit, and
    return the id the database generated for the new row.
    """
    values = list(schema.values_from(normalized))
    if len(values) != len(schema.placeholders):
        raise ConfigError(
            f"{schema.kind}: {len(values)} values for {len(schema.placeholders)} placeholders"
        )
    params = dict(zip(schema.placeholders, values))

    try:
        result = db.execute(text(schema.insert_statement), params)
        insert_id = result.lastrowid
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("insert into %s failed", schema.table)
        # prefer the driver's message over SQLAlchemy's wrapper text
        raise StorageError(str(getattr(e, "orig", None) or e)) from e

    log.info("inserted %s id=%s", schema.kind, insert_id)
    return insert_id
