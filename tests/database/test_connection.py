from __future__ import annotations

from mysql.connector.constants import ClientFlag

from src.tutoring_center.tutoring_center.database.connection import DatabaseConnection, DBConfig


def test_connections_report_matched_rows_and_leave_commits_to_callers():
    conn = DatabaseConnection(DBConfig(host="db", port=3307, user="app", password="pw", database="tutoring_center"))

    kwargs = conn.connection_kwargs()

    assert kwargs["host"] == "db"
    assert kwargs["port"] == 3307
    assert kwargs["database"] == "tutoring_center"
    assert kwargs["autocommit"] is False
    assert ClientFlag.FOUND_ROWS in kwargs["client_flags"]
