#!/usr/bin/env python3
import sqlite3
from pathlib import Path
from datetime import datetime
from typing import List

from signal_db.models import WirelessSignal
from signal_db.store.signal_database import SignalDatabase
from signal_db.utils.config import DB_PATH

DDL_SIGNALS = """
CREATE TABLE IF NOT EXISTS signals (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    logged_at TEXT NOT NULL,
    device_type TEXT NOT NULL,
    power_w REAL NOT NULL,
    frequency_mhz REAL NOT NULL,
    distance_m REAL NOT NULL,
    strength REAL NOT NULL
);
"""

def init_db(db_path: Path = DB_PATH):
    """Initialize SQLite manifest with schema"""
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    try:
        conn.execute(DDL_SIGNALS)
        conn.commit()
    finally:
        conn.close()
    print(f"[DB] Initialized SQLite at {db_path}")

def log_signals(db: SignalDatabase, db_path: Path = DB_PATH) -> int:
    """
    Archive every stored signal to the SQLite manifest.

    Args:
        db: SignalDatabase whose occupied slots are logged in storage order
        db_path: SQLite file (created by init_db)

    Returns:
        Number of rows inserted
    """
    logged_at = datetime.now().isoformat()
    rows = [
        (logged_at, s.device_type, s.power, s.frequency, s.distance, float(strength))
        for s, strength in zip(db, db.strengths())
    ]

    conn = sqlite3.connect(db_path)
    try:
        conn.executemany('''
            INSERT INTO signals (logged_at, device_type, power_w, frequency_mhz,
                                 distance_m, strength)
            VALUES (?, ?, ?, ?, ?, ?)
        ''', rows)
        conn.commit()
    finally:
        conn.close()

    print(f"[DB] Logged {len(rows)} signals to {db_path.name}")
    return len(rows)

def read_logged_signals(db_path: Path = DB_PATH) -> List[WirelessSignal]:
    """Read archived signals back in insertion order"""
    conn = sqlite3.connect(db_path)
    try:
        cursor = conn.execute(
            "SELECT device_type, power_w, frequency_mhz, distance_m FROM signals ORDER BY id"
        )
        return [
            WirelessSignal(power=power, frequency=freq, distance=dist, device_type=device)
            for device, power, freq, dist in cursor.fetchall()
        ]
    finally:
        conn.close()

if __name__ == "__main__":
    init_db()
