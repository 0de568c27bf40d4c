"""SQLite store for economic indicator series."""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Iterable, Protocol

import pandas as pd

from economic_pulse.models import DataPoint, IndicatorSeries


logger = logging.getLogger(__name__)


class SeriesReader(Protocol):
    """Read access the analysis engine needs from a series store."""

    def get_indicator_by_name(
        self, name: str, limit: int | None = None
    ) -> IndicatorSeries | None: ...

    def list_indicators_by_names(
        self, names: Iterable[str], limit: int | None = None
    ) -> list[IndicatorSeries]: ...

    def find_related(
        self, category: str, source: str, exclude: str | None = None, limit: int = 5
    ) -> list[str]: ...

    def list_active_names(self) -> list[str]: ...


class SeriesStore:
    """SQLite-backed store of indicator metadata and observations."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        """Get database connection with row factory."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """Connection that commits on success, rolls back on error, and is always closed."""
        conn = self._get_connection()
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS indicators (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL UNIQUE,
                    category TEXT NOT NULL,
                    source TEXT NOT NULL,
                    frequency TEXT,
                    units TEXT,
                    is_active INTEGER NOT NULL DEFAULT 1
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS observations (
                    indicator_id INTEGER NOT NULL REFERENCES indicators(id),
                    date TEXT NOT NULL,
                    value REAL NOT NULL,
                    fetched_at TEXT NOT NULL,
                    PRIMARY KEY (indicator_id, date)
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_obs_indicator_date
                ON observations(indicator_id, date)
            """)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def store_indicator(
        self,
        name: str,
        category: str,
        source: str,
        frequency: str | None = None,
        units: str | None = None,
        is_active: bool = True,
    ) -> int:
        """Insert or update indicator metadata. Returns the indicator id."""
        with self._connection() as conn:
            conn.execute(
                """
                INSERT INTO indicators (name, category, source, frequency, units, is_active)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(name) DO UPDATE SET
                    category = excluded.category,
                    source = excluded.source,
                    frequency = excluded.frequency,
                    units = excluded.units,
                    is_active = excluded.is_active
                """,
                (name, category, source, frequency, units, int(is_active)),
            )
            row = conn.execute(
                "SELECT id FROM indicators WHERE name = ?", (name,)
            ).fetchone()
        return int(row["id"])

    def store_observations(
        self, name: str, df: pd.DataFrame, fetched_at: datetime | None = None
    ) -> int:
        """
        Store observations for an existing indicator.

        Args:
            name: Indicator name (must already be registered)
            df: DataFrame with date index and 'value' column
            fetched_at: When the data was obtained

        Returns:
            Number of rows inserted/updated
        """
        if df.empty:
            return 0

        indicator_id = self._get_indicator_id(name)
        if indicator_id is None:
            raise ValueError(f"Indicator {name!r} is not registered")

        fetched_str = (fetched_at or datetime.now()).isoformat()
        rows = [
            (indicator_id, pd.Timestamp(idx).strftime("%Y-%m-%d"), float(val), fetched_str)
            for idx, val in df["value"].items()
            if pd.notna(val)
        ]

        with self._connection() as conn:
            conn.executemany(
                """
                INSERT OR REPLACE INTO observations (indicator_id, date, value, fetched_at)
                VALUES (?, ?, ?, ?)
                """,
                rows,
            )
        logger.info(f"Stored {len(rows)} observations for {name}")
        return len(rows)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _get_indicator_id(self, name: str) -> int | None:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT id FROM indicators WHERE name = ?", (name,)
            ).fetchone()
        return int(row["id"]) if row else None

    def _get_points(self, indicator_id: int, limit: int | None) -> list[DataPoint]:
        """Observations for one indicator, most-recent-first."""
        query = "SELECT date, value FROM observations WHERE indicator_id = ? ORDER BY date DESC"
        params: list = [indicator_id]
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)

        with self._connection() as conn:
            df = pd.read_sql_query(query, conn, params=params)

        if df.empty:
            return []

        dates = pd.to_datetime(df["date"]).dt.date
        return [DataPoint(date=d, value=float(v)) for d, v in zip(dates, df["value"])]

    def _to_series(self, row: sqlite3.Row, limit: int | None) -> IndicatorSeries:
        return IndicatorSeries(
            id=int(row["id"]),
            name=row["name"],
            category=row["category"],
            source=row["source"],
            frequency=row["frequency"],
            units=row["units"],
            data=self._get_points(int(row["id"]), limit),
        )

    def get_indicator_by_name(
        self, name: str, limit: int | None = None
    ) -> IndicatorSeries | None:
        """
        Look up one indicator with its observations.

        Returns:
            IndicatorSeries with data ordered most-recent-first, or None
        """
        with self._connection() as conn:
            row = conn.execute(
                "SELECT * FROM indicators WHERE name = ?", (name,)
            ).fetchone()
        if row is None:
            return None
        return self._to_series(row, limit)

    def list_indicators_by_names(
        self, names: Iterable[str], limit: int | None = None
    ) -> list[IndicatorSeries]:
        """Active indicators among ``names``; unknown names are omitted."""
        names = list(names)
        if not names:
            return []

        placeholders = ", ".join("?" for _ in names)
        with self._connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM indicators WHERE is_active = 1 AND name IN ({placeholders})",
                names,
            ).fetchall()

        return [self._to_series(row, limit) for row in rows]

    def find_related(
        self, category: str, source: str, exclude: str | None = None, limit: int = 5
    ) -> list[str]:
        """Names of active indicators sharing the category or the source."""
        with self._connection() as conn:
            rows = conn.execute(
                """
                SELECT name FROM indicators
                WHERE is_active = 1
                  AND (category = ? OR source = ?)
                  AND name != ?
                ORDER BY category = ? DESC, name
                LIMIT ?
                """,
                (category, source, exclude or "", category, limit),
            ).fetchall()
        return [row["name"] for row in rows]

    def list_active_names(self) -> list[str]:
        """All active indicator names in registration order."""
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT name FROM indicators WHERE is_active = 1 ORDER BY id"
            ).fetchall()
        return [row["name"] for row in rows]

    def get_store_status(self) -> dict[str, dict]:
        """Get observation counts and date ranges for each indicator."""
        with self._connection() as conn:
            rows = conn.execute("""
                SELECT
                    i.name,
                    i.category,
                    i.source,
                    COUNT(o.date) as observation_count,
                    MIN(o.date) as first_date,
                    MAX(o.date) as last_date
                FROM indicators i
                LEFT JOIN observations o ON o.indicator_id = i.id
                GROUP BY i.id
                ORDER BY i.id
            """).fetchall()

        return {
            row["name"]: {
                "category": row["category"],
                "source": row["source"],
                "observation_count": row["observation_count"],
                "first_date": row["first_date"],
                "last_date": row["last_date"],
            }
            for row in rows
        }
