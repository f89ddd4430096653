from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import mysql.connector
from mysql.connector.constants import ClientFlag


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


class DatabaseConnection:
    """Singleton-like DB connection factory shared by every store.

    Connections are used two ways:
    - a repository without a bound cursor opens one connection per call
      through `db_cursor`, which commits on success and rolls back on error;
    - `MySQLScheduleUnitOfWork` opens one connection for a whole reschedule
      and hands its cursor to the session and course repositories, so
      deletes, inserts and end-date updates commit or roll back together.

    Autocommit is off in both cases. `FOUND_ROWS` makes `rowcount` report
    matched rows, so an UPDATE that writes identical values still counts.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connection_kwargs(self) -> Dict[str, Any]:
        return {
            "host": self._config.host,
            "port": int(self._config.port),
            "user": self._config.user,
            "password": self._config.password,
            "database": self._config.database,
            "autocommit": False,
            "client_flags": [ClientFlag.FOUND_ROWS],
        }

    def connect(self):
        return mysql.connector.connect(**self.connection_kwargs())
