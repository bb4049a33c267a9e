"""
Unit tests for CryptoService and the SQLite job property store.
"""

import asyncio
from pathlib import Path

import aiosqlite
import pytest
from cryptography.fernet import InvalidToken

from backlog_link.application.use_cases import ConfigureJobUseCase
from backlog_link.domain.entities import Job
from backlog_link.domain.value_objects import ProjectLinkConfig, Secret
from backlog_link.infrastructure.security import CryptoService
from backlog_link.infrastructure.storage import SQLiteAdapter


@pytest.fixture
def crypto(tmp_path: Path) -> CryptoService:
    service = CryptoService(tmp_path / ".key")
    service.initialize()
    return service


@pytest.fixture
async def adapter(tmp_path: Path, crypto: CryptoService):
    store = SQLiteAdapter(tmp_path / "backlog_link.db", crypto)
    await store.initialize()
    yield store
    await store.close()


class TestCryptoService:
    """Tests for secret sealing."""

    def test_seal_round_trip(self, crypto: CryptoService):
        sealed = crypto.seal(Secret.from_string("hunter2"))

        assert sealed != "hunter2"
        assert crypto.unseal(sealed) == Secret.from_string("hunter2")

    def test_empty_secret_sealed_as_empty(self, crypto: CryptoService):
        assert crypto.seal(Secret()) == ""
        assert crypto.unseal("") == Secret()
        assert crypto.unseal(None) == Secret()

    def test_key_reused(self, tmp_path: Path, crypto: CryptoService):
        """A second service on the same key file can unseal."""
        sealed = crypto.seal(Secret.from_string("hunter2"))
        other = CryptoService(tmp_path / ".key")
        other.initialize()

        assert other.unseal(sealed).reveal() == "hunter2"

    def test_corrupted_token(self, crypto: CryptoService):
        with pytest.raises(InvalidToken):
            crypto.unseal("not-a-token")

    def test_requires_initialize(self, tmp_path: Path):
        with pytest.raises(RuntimeError, match="not initialized"):
            CryptoService(tmp_path / ".key").seal(Secret.from_string("x"))


class TestSQLiteAdapter:
    """Tests for job property persistence."""

    async def test_round_trip(self, adapter: SQLiteAdapter):
        config = ProjectLinkConfig(
            url="https://example.backlog.jp/projects/ABC",
            user_id="bob",
            password="hunter2",
            api_key="apikey123",
        )

        await adapter.save_project_link("team/build", config)
        loaded = await adapter.get_project_link("team/build")

        assert loaded == config
        assert loaded.project == "ABC"
        assert loaded.password.reveal() == "hunter2"

    async def test_secrets_encrypted_on_disk(self, adapter: SQLiteAdapter):
        await adapter.save_project_link(
            "build", ProjectLinkConfig(url="https://example.backlog.jp", password="hunter2")
        )

        data = await adapter.get_property_data("build", "backlog.project_link")

        assert data["url"] == "https://example.backlog.jp/"
        assert "hunter2" not in str(data)
        assert data["api_key"] == ""

    async def test_absent_url_round_trip(self, adapter: SQLiteAdapter):
        await adapter.save_project_link("build", ProjectLinkConfig())
        loaded = await adapter.get_project_link("build")

        assert loaded is not None
        assert loaded.url is None

    async def test_missing(self, adapter: SQLiteAdapter):
        assert await adapter.get_project_link("nope") is None

    async def test_delete(self, adapter: SQLiteAdapter):
        await adapter.save_project_link("build", ProjectLinkConfig(url="https://example.backlog.jp"))

        await adapter.delete_project_link("build")

        assert await adapter.get_project_link("build") is None

    async def test_delete_job(self, adapter: SQLiteAdapter):
        await adapter.save_project_link("build", ProjectLinkConfig(url="https://example.backlog.jp"))
        await adapter.save_project_link("other", ProjectLinkConfig(url="https://example.backlog.jp"))

        await adapter.delete_job("build")

        assert await adapter.get_project_link("build") is None
        assert await adapter.get_project_link("other") is not None

    async def test_initialize_is_idempotent(self, adapter: SQLiteAdapter):
        connection = adapter._connection

        await adapter.initialize()

        assert adapter._connection is connection

    async def test_concurrent_initialize_opens_one_connection(
        self, tmp_path: Path, crypto: CryptoService
    ):
        """Handlers racing on first use must share a single connection."""
        store = SQLiteAdapter(tmp_path / "race.db", crypto)
        opened = []
        connect = aiosqlite.connect

        def counting_connect(*args, **kwargs):
            opened.append(args)
            return connect(*args, **kwargs)

        with pytest.MonkeyPatch.context() as mp:
            mp.setattr(aiosqlite, "connect", counting_connect)
            await asyncio.gather(store.initialize(), store.initialize(), store.initialize())

        assert len(opened) == 1
        await store.close()
        assert store._connection is None

    async def test_requires_initialize(self, tmp_path: Path, crypto: CryptoService):
        store = SQLiteAdapter(tmp_path / "x.db", crypto)

        with pytest.raises(RuntimeError, match="not initialized"):
            await store.get_project_link("build")

    async def test_use_case_persists_through_adapter(self, adapter: SQLiteAdapter):
        """Configuring a job and reloading it in a fresh job should match."""
        use_case = ConfigureJobUseCase(storage=adapter)
        await use_case.execute(Job(name="build"), {"url": "https://example.backlog.jp/projects/XYZ"})

        fresh = Job(name="build")
        config = await use_case.load(fresh)

        assert config.project == "XYZ"
        assert fresh.get_property(ProjectLinkConfig) == config
