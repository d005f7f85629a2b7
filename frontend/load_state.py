import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, TypeVar, Union

from frontend.result import Err, Result


logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Unloaded:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Loaded(Generic[T]):
    result: Result[T]


LoadState = Union[Unloaded, Loading, Loaded[T]]


class Resource(Generic[T]):
    """
    Load state of one piece of remote data, owned by one component.

    Unloaded -> Loading on the first mount(), Loading -> Loaded(result)
    when the loader finishes, whatever the outcome. Loaded is final:
    a fresh Resource is needed to load again.

    The Unloaded check in mount() is the only guard against a second
    fetch. It holds because everything runs on one event loop thread.
    """

    def __init__(self,
                 loader: Callable[[], Awaitable[Result[T]]],
                 on_change: Optional[Callable[[], None]] = None):
        self.loader = loader
        self.on_change = on_change
        self.state: LoadState = Unloaded()
        self.mounted = False
        self._task: Optional[asyncio.Task] = None

    def mount(self) -> None:
        """
        Starts the fetch if nothing was started yet. Safe to call on
        every render.
        """

        self.mounted = True
        if not isinstance(self.state, Unloaded):
            return

        self.state = Loading()
        self._task = asyncio.get_running_loop().create_task(self._run())

    def unmount(self) -> None:
        """
        Whatever the loader returns from now on is dropped.
        """

        self.mounted = False

    async def _run(self) -> None:
        try:
            result = await self.loader()
        except Exception as e:
            logger.exception("Loader failed")
            result = Err(f"Error: {e}")

        if not self.mounted:
            logger.debug("Component unmounted, dropping result")
            return

        self.state = Loaded(result)
        if self.on_change is not None:
            self.on_change()

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    @property
    def is_loaded(self) -> bool:
        return isinstance(self.state, Loaded)
