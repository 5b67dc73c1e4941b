import functools

from sqlalchemy.exc import SQLAlchemyError

from src.app.services.unit_of_work import StoreError


def translate_store_errors(method):
    """Re-raise SQLAlchemy failures of a repository method as StoreError"""

    @functools.wraps(method)
    async def wrapper(*args, **kwargs):
        try:
            return await method(*args, **kwargs)
        except SQLAlchemyError as exc:
            raise StoreError(f"{method.__qualname__}: {exc}") from exc

    return wrapper
