from collections.abc import Callable, Sequence
from functools import wraps
from logging import Logger, getLogger

__all__ = (
    "deprecate",
    "deprecated",
    "set_deprecation_logger",
)

_logger: Logger = getLogger("thawable.deprecation")
_log: Callable[[str], None] = _logger.warning


def set_deprecation_logger(
    log: Callable[[str], None] | None,
    /,
) -> None:
    """
    Replace the process wide sink of deprecation warnings.

    Passing ``None`` restores the default which logs a warning through the
    ``thawable.deprecation`` logger.
    """
    global _log
    _log = log if log is not None else _logger.warning


def deprecate(
    method: str,
    replacement: str | Sequence[str],
    *,
    log: Callable[[str], None] | None = None,
) -> None:
    replacements: str = (
        f"function {replacement}"
        if isinstance(replacement, str)
        else f"functions {', '.join(replacement)}"
    )
    (log or _log)(
        f"DeprecationWarning: Method '{method}' is deprecated"
        f" and will be removed in a future release, please use {replacements}."
    )


def deprecated[**Args, Result](
    method: str,
    replacement: str | Sequence[str],
    *,
    log: Callable[[str], None] | None = None,
) -> Callable[[Callable[Args, Result]], Callable[Args, Result]]:
    """
    Wrap a function so that every call reports its deprecation first.

    The wrapper delegates to the wrapped function unchanged. Warnings go to
    ``log`` when given, otherwise to the sink set by ``set_deprecation_logger``
    at the time of the call.

    Parameters
    ----------
    method : str
        Name of the deprecated operation, as shown in the warning.
    replacement : str | Sequence[str]
        Name or names of the operations to use instead.
    log : Callable[[str], None] | None
        Optional sink overriding the process wide one.
    """

    def wrap(
        function: Callable[Args, Result],
    ) -> Callable[Args, Result]:
        @wraps(function)
        def deprecated_function(
            *args: Args.args,
            **kwargs: Args.kwargs,
        ) -> Result:
            deprecate(
                method,
                replacement,
                log=log,
            )
            return function(*args, **kwargs)

        return deprecated_function

    return wrap
