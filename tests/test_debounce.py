# test_debounce.py: purskeet yhdeksi Debouncer-kutsuksi
#
# Viive on testeissä lyhyt (20 ms), jotta testit pysyvät nopeina.
#
# Aja: uv run pytest tests/test_debounce.py -v

import asyncio

from unittest.mock import AsyncMock

from browse.debounce import Debouncer

DELAY = 0.02


async def test_purske_lahettaa_vain_viimeisen_arvon():
    callback = AsyncMock()
    debouncer = Debouncer(DELAY, callback)

    for text in ["b", "ba", "bat", "batman"]:
        debouncer.push(text)
    await debouncer.join()

    callback.assert_awaited_once_with("batman")


async def test_ei_lahetetta_ennen_hiljaista_jaksoa():
    callback = AsyncMock()
    debouncer = Debouncer(DELAY, callback)

    debouncer.push("bat")
    await asyncio.sleep(DELAY / 4)
    assert debouncer.pending
    callback.assert_not_awaited()

    await debouncer.join()
    callback.assert_awaited_once_with("bat")
    assert not debouncer.pending


async def test_erilliset_jaksot_lahettavat_kumpikin():
    callback = AsyncMock()
    debouncer = Debouncer(DELAY, callback)

    debouncer.push("bat")
    await debouncer.join()
    debouncer.push("batman")
    await debouncer.join()

    assert [c.args[0] for c in callback.await_args_list] == ["bat", "batman"]


async def test_cancel_pudottaa_odottavan_arvon():
    callback = AsyncMock()
    debouncer = Debouncer(DELAY, callback)

    debouncer.push("bat")
    debouncer.cancel()
    await asyncio.sleep(DELAY * 2)

    callback.assert_not_awaited()


async def test_flush_lahettaa_heti():
    callback = AsyncMock()
    debouncer = Debouncer(10, callback)

    debouncer.push("joker")
    await debouncer.flush()

    callback.assert_awaited_once_with("joker")
    assert not debouncer.pending


async def test_flush_ilman_odottavaa_ei_tee_mitaan():
    callback = AsyncMock()
    await Debouncer(DELAY, callback).flush()
    callback.assert_not_awaited()


async def test_aclose_peruu_kaynnissa_olevan_callbackin():
    started = asyncio.Event()
    cancelled = asyncio.Event()

    async def slow(value):
        started.set()
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    debouncer = Debouncer(0, slow)
    debouncer.push("bat")
    await started.wait()

    await debouncer.aclose()

    assert cancelled.is_set()
    assert not debouncer.pending
