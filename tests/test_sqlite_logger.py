#!/usr/bin/env python3
"""Tests for the SQLite signal manifest"""

import sqlite3

import pytest

from signal_db.database.sqlite_logger import init_db, log_signals, read_logged_signals
from signal_db.models import WirelessSignal
from signal_db.store.signal_database import SignalDatabase


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "manifest" / "signals.db"
    init_db(path)
    return path


@pytest.fixture
def database():
    db = SignalDatabase(5)
    db.add_signal(WirelessSignal(0.2, 2400.0, 10.0, "WiFi"))
    db.add_signal(WirelessSignal(50.0, 101.5, 0.0, "Radio"))
    return db


class TestSQLiteLogger:
    def test_init_creates_table(self, db_path):
        assert db_path.exists()
        conn = sqlite3.connect(db_path)
        try:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
        finally:
            conn.close()
        assert "signals" in tables

    def test_log_and_read_back(self, db_path, database):
        assert log_signals(database, db_path) == 2

        restored = read_logged_signals(db_path)
        assert restored == list(database)

    def test_strength_column(self, db_path, database):
        log_signals(database, db_path)
        conn = sqlite3.connect(db_path)
        try:
            strengths = [row[0] for row in conn.execute("SELECT strength FROM signals ORDER BY id")]
        finally:
            conn.close()
        assert strengths == pytest.approx([0.002, 50.0])

    def test_empty_database_logs_nothing(self, db_path):
        assert log_signals(SignalDatabase(3), db_path) == 0
        assert read_logged_signals(db_path) == []

    def test_init_is_idempotent(self, db_path, database):
        log_signals(database, db_path)
        init_db(db_path)
        assert len(read_logged_signals(db_path)) == 2
