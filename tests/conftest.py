import asyncio

import pytest

from liveserve.config import Config


@pytest.fixture
def site(tmp_path):
    root = tmp_path / "site"
    root.mkdir()
    (root / "histograms.html").write_text(
        "<html><head><title>h</title></head><body><h1>Histograms</h1></body></html>"
    )
    (root / "top5.json").write_text('[{"team": "A"}]')
    (root / "app.js").write_text("console.log(1);")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "notes.xyz").write_bytes(b"\x00\x01")
    (root / "sub").mkdir()
    (root / "sub" / "page.html").write_text("<p>no body tag</p>")
    (tmp_path / "secret.txt").write_text("top secret")
    return root


@pytest.fixture
def config(site):
    return Config(
        root=str(site),
        index="histograms.html",
        watch=(str(site / "top5.json"), str(site / "histograms.html")),
    )


@pytest.fixture
def wait_until():
    """Await until ``predicate()`` holds, failing after ``timeout`` seconds."""
    async def wait(predicate, timeout=2.0):
        async def poll():
            while not predicate():
                await asyncio.sleep(0.01)
        await asyncio.wait_for(poll(), timeout)
    return wait
