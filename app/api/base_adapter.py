"""Base Adapter.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Callable, Generic, ParamSpec, TypeVar

from fastapi.concurrency import run_in_threadpool

_P = ParamSpec("_P")
_R = TypeVar("_R")
_T = TypeVar("_T")


class BaseAdapter(Generic[_T]):
    """Adapter between async routes and a blocking service.

    Service calls are run on the threadpool, so concurrent requests reach
    the service from parallel worker threads.
    """

    _service: _T

    def __init__(self, service: _T) -> None:
        """Set service."""
        self._service = service

    @staticmethod
    async def _call(
        func: Callable[_P, _R],
        *args: _P.args,
        **kwargs: _P.kwargs,
    ) -> _R:
        return await run_in_threadpool(func, *args, **kwargs)
