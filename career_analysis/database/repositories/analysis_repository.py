from psycopg import sql
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from career_analysis.analysis.models import AnalysisResult, Variant
from career_analysis.database.connection import get_connection
from career_analysis.database.models import AnalysisRecord

TABLES: dict[Variant, str] = {
    Variant.RESUME: "resume_analyses",
    Variant.LINKEDIN_PROFILE: "linkedin_analyses",
}


class AnalysisRepository:
    """Stores normalized analyses against the user that requested them."""

    def ensure_tables(self) -> None:
        """Create both analysis tables if they do not exist yet."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                for table in TABLES.values():
                    cur.execute(
                        sql.SQL(
                            """
                            CREATE TABLE IF NOT EXISTS {table} (
                                id SERIAL PRIMARY KEY,
                                user_id TEXT NOT NULL,
                                job_description TEXT NOT NULL,
                                analysis JSONB NOT NULL,
                                created_at TIMESTAMPTZ NOT NULL DEFAULT now()
                            )
                            """
                        ).format(table=sql.Identifier(table))
                    )
            conn.commit()

    def save(
        self,
        user_id: str,
        variant: Variant,
        job_description: str,
        result: AnalysisResult,
    ) -> int:
        """Insert one analysis and return its id."""
        query = sql.SQL(
            """
            INSERT INTO {table} (user_id, job_description, analysis, created_at)
            VALUES (%s, %s, %s, now())
            RETURNING id
            """
        ).format(table=sql.Identifier(TABLES[variant]))
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(query, (user_id, job_description, Jsonb(result.to_payload())))
                row = cur.fetchone()
            conn.commit()
        if row is None:
            raise RuntimeError(f"Insert into {TABLES[variant]} returned no id")
        return int(row[0])

    def list_recent(
        self,
        user_id: str,
        variant: Variant,
        limit: int = 10,
    ) -> list[AnalysisRecord]:
        """Return the user's latest analyses of one variant, newest first."""
        query = sql.SQL(
            """
            SELECT id, user_id, job_description, analysis, created_at
            FROM {table}
            WHERE user_id = %s
            ORDER BY created_at DESC, id DESC
            LIMIT %s
            """
        ).format(table=sql.Identifier(TABLES[variant]))
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, (user_id, limit))
                rows = cur.fetchall()
        return [
            AnalysisRecord(
                id=row["id"],
                user_id=row["user_id"],
                job_description=row["job_description"],
                analysis=row["analysis"],
                created_at=row["created_at"],
            )
            for row in rows
        ]
