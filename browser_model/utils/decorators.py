import logging
from functools import wraps
from typing import Callable, TypeVar

from browser_model.errors import BrowserError

logger = logging.getLogger(__name__)


T = TypeVar('T')

def reraise_as(
    error_cls: type[BrowserError],
    *catch: type[Exception],
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator that turns third-party failures into a typed browser error."""
    catch = catch or (Exception,)

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except BrowserError:
                raise
            except catch as e:
                logger.error(f"Error in {func.__name__}: {str(e)}")
                raise error_cls(str(e)) from e
        return wrapper
    return decorator
