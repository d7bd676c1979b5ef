"""
SQLite Repository

Handles all database operations using SQLite.
"""

import logging
import os
import sqlite3
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from outletcogs.models.outlets import Alert, Outlet, ProcurementRecord, RevenuePolicy, RevenueRecord
from outletcogs.storage.repository import CogsRepository

logger = logging.getLogger(__name__)

# Default database path
DEFAULT_DB_PATH = "./data/db/outletcogs.db"


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Get a database connection."""
    db_path = db_path or os.environ.get("DATABASE_PATH", DEFAULT_DB_PATH)

    # Ensure directory exists
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_database(db_path: Optional[str] = None):
    """Initialize database tables."""
    conn = get_connection(db_path)

    try:
        cursor = conn.cursor()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS outlets (
                outlet_id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE CHECK (length(trim(name)) > 0),
                description TEXT
            )
        """)

        # One policy per outlet
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS revenue_policies (
                outlet_id INTEGER PRIMARY KEY,
                target_percentage REAL NOT NULL DEFAULT 25.0,
                lower_threshold REAL NOT NULL DEFAULT 1000.0,
                lower_adjustment REAL NOT NULL DEFAULT 1.10,
                upper_threshold REAL NOT NULL DEFAULT 5000.0,
                upper_adjustment REAL NOT NULL DEFAULT 0.95,
                FOREIGN KEY (outlet_id) REFERENCES outlets(outlet_id)
            )
        """)

        # Category is '' rather than NULL so the unique key holds for uncategorised rows
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS revenue_records (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                outlet_id INTEGER NOT NULL,
                record_date TEXT NOT NULL,
                category TEXT NOT NULL DEFAULT '',
                amount REAL NOT NULL CHECK (amount >= 0),
                notes TEXT,
                UNIQUE (outlet_id, record_date, category),
                FOREIGN KEY (outlet_id) REFERENCES outlets(outlet_id)
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS procurement_records (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                outlet_id INTEGER NOT NULL,
                record_date TEXT NOT NULL,
                item_category TEXT,
                item_description TEXT,
                quantity REAL NOT NULL DEFAULT 1 CHECK (quantity >= 0),
                unit_cost REAL NOT NULL CHECK (unit_cost >= 0),
                total_cost REAL NOT NULL CHECK (total_cost >= 0),
                notes TEXT,
                FOREIGN KEY (outlet_id) REFERENCES outlets(outlet_id)
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS alerts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                outlet_id INTEGER NOT NULL,
                alert_date TEXT NOT NULL,
                actual_percentage REAL NOT NULL,
                target_percentage REAL NOT NULL,
                variance REAL NOT NULL,
                status TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                UNIQUE (outlet_id, alert_date),
                FOREIGN KEY (outlet_id) REFERENCES outlets(outlet_id)
            )
        """)

        # Create indexes
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_procurement_outlet_date ON procurement_records(outlet_id, record_date)")
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_alerts_date ON alerts(alert_date)")

        conn.commit()
        logger.info("Database initialized successfully")

    finally:
        conn.close()


def _row_to_outlet(row: sqlite3.Row) -> Outlet:
    return Outlet(outlet_id=row['outlet_id'], name=row['name'], description=row['description'])


def _row_to_alert(row: sqlite3.Row) -> Alert:
    return Alert(
        alert_id=row['id'],
        outlet_id=row['outlet_id'],
        outlet_name=row['outlet_name'],
        alert_date=date.fromisoformat(row['alert_date']),
        actual_percentage=row['actual_percentage'],
        target_percentage=row['target_percentage'],
        variance=row['variance'],
        status=row['status'],
        created_at=datetime.fromisoformat(row['created_at']),
        updated_at=datetime.fromisoformat(row['updated_at']),
    )


_ALERT_SELECT = """
    SELECT a.*, o.name AS outlet_name
    FROM alerts a
    JOIN outlets o ON o.outlet_id = a.outlet_id
"""


class SqliteRepository(CogsRepository):
    """CogsRepository backed by a SQLite file. One connection per call."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or os.environ.get("DATABASE_PATH", DEFAULT_DB_PATH)

    def _connect(self) -> sqlite3.Connection:
        return get_connection(self.db_path)

    # Outlet operations

    def get_outlet(self, outlet_id: int) -> Optional[Outlet]:
        conn = self._connect()

        try:
            row = conn.execute("SELECT * FROM outlets WHERE outlet_id = ?", (outlet_id,)).fetchone()
            return _row_to_outlet(row) if row else None

        finally:
            conn.close()

    def get_outlet_by_name(self, name: str) -> Optional[Outlet]:
        conn = self._connect()

        try:
            row = conn.execute("SELECT * FROM outlets WHERE name = ?", (name,)).fetchone()
            return _row_to_outlet(row) if row else None

        finally:
            conn.close()

    def list_outlets(self) -> List[Outlet]:
        conn = self._connect()

        try:
            rows = conn.execute("SELECT * FROM outlets ORDER BY outlet_id").fetchall()
            return [_row_to_outlet(row) for row in rows]

        finally:
            conn.close()

    def create_outlet(self, name: str, description: Optional[str] = None) -> Outlet:
        conn = self._connect()

        try:
            cursor = conn.execute(
                "INSERT INTO outlets (name, description) VALUES (?, ?)",
                (name, description),
            )
            outlet = Outlet(outlet_id=cursor.lastrowid, name=name, description=description)
            conn.commit()
            logger.info(f"Created outlet {name}")
            return outlet

        finally:
            conn.close()

    # Policy operations

    def get_policy(self, outlet_id: int) -> Optional[RevenuePolicy]:
        conn = self._connect()

        try:
            row = conn.execute(
                "SELECT * FROM revenue_policies WHERE outlet_id = ?", (outlet_id,)
            ).fetchone()
            if not row:
                return None

            return RevenuePolicy(
                outlet_id=row['outlet_id'],
                target_percentage=row['target_percentage'],
                lower_threshold=row['lower_threshold'],
                lower_adjustment=row['lower_adjustment'],
                upper_threshold=row['upper_threshold'],
                upper_adjustment=row['upper_adjustment'],
            )

        finally:
            conn.close()

    def save_policy(self, policy: RevenuePolicy) -> RevenuePolicy:
        conn = self._connect()

        try:
            conn.execute("""
                INSERT OR REPLACE INTO revenue_policies
                (outlet_id, target_percentage, lower_threshold, lower_adjustment, upper_threshold, upper_adjustment)
                VALUES (?, ?, ?, ?, ?, ?)
            """, (
                policy.outlet_id,
                policy.target_percentage,
                policy.lower_threshold,
                policy.lower_adjustment,
                policy.upper_threshold,
                policy.upper_adjustment,
            ))
            conn.commit()
            return policy

        finally:
            conn.close()

    # Aggregate queries

    def sum_revenue(self, outlet_id: int, day: date) -> float:
        conn = self._connect()

        try:
            row = conn.execute("""
                SELECT COALESCE(SUM(amount), 0) AS total
                FROM revenue_records
                WHERE outlet_id = ? AND record_date = ?
            """, (outlet_id, day.isoformat())).fetchone()
            return float(row['total'])

        finally:
            conn.close()

    def sum_procurement_cost(self, outlet_id: int, day: date) -> float:
        conn = self._connect()

        try:
            row = conn.execute("""
                SELECT COALESCE(SUM(total_cost), 0) AS total
                FROM procurement_records
                WHERE outlet_id = ? AND record_date = ?
            """, (outlet_id, day.isoformat())).fetchone()
            return float(row['total'])

        finally:
            conn.close()

    def revenue_by_date(self, outlet_id: int, start_date: date, end_date: date) -> Dict[date, float]:
        return self._sum_by_date("revenue_records", "amount", outlet_id, start_date, end_date)

    def procurement_cost_by_date(self, outlet_id: int, start_date: date, end_date: date) -> Dict[date, float]:
        return self._sum_by_date("procurement_records", "total_cost", outlet_id, start_date, end_date)

    def _sum_by_date(
        self,
        table: str,
        column: str,
        outlet_id: int,
        start_date: date,
        end_date: date,
    ) -> Dict[date, float]:
        """Group a record table by date and sum one column."""
        conn = self._connect()

        try:
            rows = conn.execute(f"""
                SELECT record_date, SUM({column}) AS total
                FROM {table}
                WHERE outlet_id = ? AND record_date BETWEEN ? AND ?
                GROUP BY record_date
                ORDER BY record_date ASC
            """, (outlet_id, start_date.isoformat(), end_date.isoformat())).fetchall()

            return {
                date.fromisoformat(row['record_date']): float(row['total'] or 0)
                for row in rows
            }

        finally:
            conn.close()

    # Record operations

    def upsert_revenue(self, record: RevenueRecord) -> RevenueRecord:
        conn = self._connect()

        try:
            conn.execute("""
                INSERT INTO revenue_records (outlet_id, record_date, category, amount, notes)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT (outlet_id, record_date, category)
                DO UPDATE SET amount = excluded.amount, notes = excluded.notes
            """, (
                record.outlet_id,
                record.record_date.isoformat(),
                record.category or "",
                record.amount,
                record.notes,
            ))
            row = conn.execute("""
                SELECT id FROM revenue_records
                WHERE outlet_id = ? AND record_date = ? AND category = ?
            """, (record.outlet_id, record.record_date.isoformat(), record.category or "")).fetchone()
            conn.commit()

            return record.model_copy(update={"record_id": row['id']})

        finally:
            conn.close()

    def add_procurement(self, record: ProcurementRecord) -> ProcurementRecord:
        conn = self._connect()

        try:
            cursor = conn.execute("""
                INSERT INTO procurement_records
                (outlet_id, record_date, item_category, item_description, quantity, unit_cost, total_cost, notes)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """, (
                record.outlet_id,
                record.record_date.isoformat(),
                record.item_category,
                record.item_description,
                record.quantity,
                record.unit_cost,
                record.total_cost,
                record.notes,
            ))
            conn.commit()

            return record.model_copy(update={"record_id": cursor.lastrowid})

        finally:
            conn.close()

    # Alert operations

    def upsert_alert(self, alert: Alert) -> Alert:
        conn = self._connect()
        now = datetime.now(timezone.utc).isoformat()

        try:
            # Single statement on the unique key, so concurrent writers cannot duplicate
            conn.execute("""
                INSERT INTO alerts
                (outlet_id, alert_date, actual_percentage, target_percentage, variance, status, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT (outlet_id, alert_date) DO UPDATE SET
                    actual_percentage = excluded.actual_percentage,
                    target_percentage = excluded.target_percentage,
                    variance = excluded.variance,
                    status = excluded.status,
                    updated_at = excluded.updated_at
            """, (
                alert.outlet_id,
                alert.alert_date.isoformat(),
                alert.actual_percentage,
                alert.target_percentage,
                alert.variance,
                alert.status.value,
                now,
                now,
            ))
            conn.commit()

            row = conn.execute(
                _ALERT_SELECT + " WHERE a.outlet_id = ? AND a.alert_date = ?",
                (alert.outlet_id, alert.alert_date.isoformat()),
            ).fetchone()
            return _row_to_alert(row)

        finally:
            conn.close()

    def list_alerts_since(self, since: date) -> List[Alert]:
        conn = self._connect()

        try:
            rows = conn.execute(
                _ALERT_SELECT + " WHERE a.alert_date >= ? ORDER BY a.alert_date DESC, a.id DESC",
                (since.isoformat(),),
            ).fetchall()
            return [_row_to_alert(row) for row in rows]

        finally:
            conn.close()

    def check_connection(self) -> bool:
        conn = self._connect()

        try:
            conn.execute("SELECT 1").fetchone()
            return True

        finally:
            conn.close()
