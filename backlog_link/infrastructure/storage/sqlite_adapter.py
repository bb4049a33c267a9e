"""
SQLite Adapter - Job property persistence.

Properties are stored as JSON documents; secrets inside them are sealed
with the CryptoService and never written in cleartext.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

import aiosqlite

from backlog_link.application.interfaces import StoragePort
from backlog_link.domain.value_objects import ProjectLinkConfig
from backlog_link.infrastructure.security import CryptoService
from .migrations import run_migrations


logger = logging.getLogger(__name__)

PROJECT_LINK_TYPE = "backlog.project_link"


class SQLiteAdapter(StoragePort):
    """
    SQLite job property store.

    Provides async CRUD operations keyed by job full name and property type.
    """

    def __init__(self, db_path: Path, crypto: CryptoService) -> None:
        """
        Initialize the adapter.

        Args:
            db_path: Path to the SQLite database file.
            crypto: Initialized crypto service sealing secrets.
        """
        self.db_path = db_path
        self.crypto = crypto
        self._connection: Optional[aiosqlite.Connection] = None
        self._init_lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Initialize database and run migrations. Safe to call repeatedly."""
        async with self._init_lock:
            if self._connection is not None:
                return

            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            # Run migrations synchronously first
            run_migrations(self.db_path)

            connection = await aiosqlite.connect(str(self.db_path))
            connection.row_factory = aiosqlite.Row
            self._connection = connection

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    @property
    def conn(self) -> aiosqlite.Connection:
        """Get the active connection or raise error."""
        if not self._connection:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self._connection

    # ==================== Generic Property Operations ====================

    async def get_property_data(self, job_name: str, property_type: str) -> Optional[dict[str, Any]]:
        """Get a stored property document."""
        cursor = await self.conn.execute(
            "SELECT data FROM job_properties WHERE job_name = ? AND property_type = ?",
            (job_name, property_type)
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return json.loads(row["data"])

    async def set_property_data(self, job_name: str, property_type: str, data: dict[str, Any]) -> None:
        """Store a property document, replacing any previous one."""
        await self.conn.execute(
            """
            INSERT OR REPLACE INTO job_properties (job_name, property_type, data, updated_at)
            VALUES (?, ?, ?, CURRENT_TIMESTAMP)
            """,
            (job_name, property_type, json.dumps(data))
        )
        await self.conn.commit()

    async def delete_property_data(self, job_name: str, property_type: str) -> None:
        await self.conn.execute(
            "DELETE FROM job_properties WHERE job_name = ? AND property_type = ?",
            (job_name, property_type)
        )
        await self.conn.commit()

    async def delete_job(self, job_name: str) -> None:
        await self.conn.execute(
            "DELETE FROM job_properties WHERE job_name = ?",
            (job_name,)
        )
        await self.conn.commit()
        logger.info("Deleted stored properties of job %s", job_name)

    # ==================== Project Link Operations ====================

    async def save_project_link(self, job_name: str, config: ProjectLinkConfig) -> None:
        """Save a project link with its secrets sealed."""
        data = {
            "url": config.url,
            "user_id": config.user_id,
            "password": self.crypto.seal(config.password),
            "api_key": self.crypto.seal(config.api_key),
        }
        await self.set_property_data(job_name, PROJECT_LINK_TYPE, data)

    async def get_project_link(self, job_name: str) -> Optional[ProjectLinkConfig]:
        """
        Get a stored project link.

        Raises:
            InvalidToken: If a sealed secret cannot be decrypted.
        """
        data = await self.get_property_data(job_name, PROJECT_LINK_TYPE)
        if data is None:
            return None
        return ProjectLinkConfig(
            url=data.get("url"),
            user_id=data.get("user_id"),
            password=self.crypto.unseal(data.get("password")),
            api_key=self.crypto.unseal(data.get("api_key")),
        )

    async def delete_project_link(self, job_name: str) -> None:
        await self.delete_property_data(job_name, PROJECT_LINK_TYPE)
