import asyncio
import os

from app.infrastructure.external.file_storage.local_file_storage import (
    CHUNK_SIZE,
    LocalFileStorage,
)


def test_write_creates_uuid_named_file(tmp_path) -> None:
    storage = LocalFileStorage(root_dir=str(tmp_path / "nested" / "root"))

    async def run():
        await storage.ensure_root()
        await storage.ensure_root()
        return await storage.write(b"hello")

    path = asyncio.run(run())

    assert os.path.dirname(path) == storage.root_dir
    assert len(os.path.basename(path)) == 36
    with open(path, "rb") as f:
        assert f.read() == b"hello"
    assert asyncio.run(storage.exists(path))
    assert asyncio.run(storage.size(path)) == 5


def test_remove_tolerates_missing_file(tmp_path) -> None:
    storage = LocalFileStorage(root_dir=str(tmp_path))
    path = asyncio.run(storage.write(b"data"))

    asyncio.run(storage.remove(path))
    asyncio.run(storage.remove(path))

    assert not asyncio.run(storage.exists(path))


def test_exists_is_false_for_directories(tmp_path) -> None:
    storage = LocalFileStorage(root_dir=str(tmp_path))

    assert not asyncio.run(storage.exists(str(tmp_path)))


def test_iter_bytes_streams_in_chunks(tmp_path) -> None:
    storage = LocalFileStorage(root_dir=str(tmp_path))
    payload = os.urandom(CHUNK_SIZE * 2 + 10)
    path = asyncio.run(storage.write(payload))

    async def collect():
        return [chunk async for chunk in storage.iter_bytes(path)]

    chunks = asyncio.run(collect())

    assert [len(chunk) for chunk in chunks] == [CHUNK_SIZE, CHUNK_SIZE, 10]
    assert b"".join(chunks) == payload
