import asyncio
from typing import Any, Awaitable, Callable


class Debouncer:
    """
    Viivästää näppäinpainallukset yhdeksi arvoksi.
    Arvo lähetetään callbackille vasta kun `delay` sekuntia on kulunut
    ilman uutta push()-kutsua. Uusi push peruu edellisen ajastuksen.
    """

    def __init__(self, delay: float, callback: Callable[[Any], Awaitable[None]]):
        self.delay = delay
        self.callback = callback
        self._task: asyncio.Task | None = None
        self._value: Any = None
        # asyncio pitää taskeista vain heikkoja viitteitä
        self._running: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def push(self, value: Any) -> None:
        self.cancel()
        self._value = value
        task = asyncio.create_task(self._fire_later())
        self._task = task
        self._running.add(task)
        task.add_done_callback(self._running.discard)

    async def _fire_later(self) -> None:
        await asyncio.sleep(self.delay)
        # Laukaistu: uusi push() ei enää peru tätä kutsua
        self._task = None
        await self.callback(self._value)

    async def flush(self) -> None:
        """Lähetä odottava arvo heti."""
        if not self.pending:
            return
        self.cancel()
        await self.callback(self._value)

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()
        self._task = None

    async def aclose(self) -> None:
        """Peru ajastus ja jo käynnissä olevat callbackit, odota että ne loppuvat."""
        self.cancel()
        tasks = list(self._running)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def join(self) -> None:
        """Odota että ajastetut ja käynnissä olevat callbackit ovat valmiita."""
        while self._running:
            await asyncio.gather(*self._running, return_exceptions=True)
