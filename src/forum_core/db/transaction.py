# src/forum_core/db/transaction.py
"""Transaction boundary used by every mutating forum operation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import (
    DataError,
    DBAPIError,
    IntegrityError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from forum_core.errors import (
    ConstraintViolationError,
    InputValidationError,
    StoreError,
    TransientStoreError,
)

logger = logging.getLogger(__name__)


def translate_store_error(exc: SQLAlchemyError) -> StoreError | None:
    """Map a SQLAlchemy failure onto the forum error taxonomy.

    Returns ``None`` for errors that are neither constraint violations nor
    transient, which callers should re-raise unchanged.
    """
    if isinstance(exc, IntegrityError | DataError):
        return ConstraintViolationError(str(exc.orig))
    if isinstance(exc, OperationalError | PoolTimeoutError):
        return TransientStoreError(str(exc))
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return TransientStoreError(str(exc))
    return None


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """Run the enclosed block as a single atomic unit against ``db``.

    The session is committed when the block exits normally and rolled back on
    any exception, so no partial mutation survives a failure. Store failures
    are re-raised as :class:`ConstraintViolationError` or
    :class:`TransientStoreError`, and integers the driver cannot bind as
    :class:`InputValidationError`.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        translated = translate_store_error(exc)
        if translated is None:
            raise
        logger.warning("Rolled back unit of work: %s", translated)
        raise translated from exc
    except OverflowError as exc:
        # The driver refuses to bind integers outside the column range.
        db.rollback()
        raise InputValidationError(f"value out of range: {exc}") from exc
    except BaseException:
        db.rollback()
        raise
