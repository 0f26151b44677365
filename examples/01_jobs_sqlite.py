"""Job repository on in-memory SQLite: compose clauses, then create, list, update, get and remove."""

from __future__ import annotations

import asyncio
import sqlite3
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "sql_compose").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sql_compose import (
    AsyncDatabase,
    AsyncJobRepository,
    JobCriteria,
    NewJob,
    NotFoundError,
    SQLiteDialect,
    compose_filter_clause,
    compose_set_clause,
    setup_logging,
)


async def main() -> None:
    setup_logging(level="INFO", format="console")

    print("set clause:", compose_set_clause({"title": "Staff", "salary": 1}, {}))
    print("filter clause:", compose_filter_clause(JobCriteria(title="eng", min_salary=0)))

    conn = sqlite3.connect(":memory:")
    try:
        conn.execute("CREATE TABLE companies (handle TEXT PRIMARY KEY, name TEXT, "
                     "description TEXT, num_employees INTEGER, logo_url TEXT)")
        conn.execute("CREATE TABLE jobs (id INTEGER PRIMARY KEY AUTOINCREMENT, title TEXT, "
                     "salary INTEGER, equity NUMERIC, company_handle TEXT)")
        conn.execute("INSERT INTO companies (handle, name) VALUES ('acme', 'Acme')")

        db = AsyncDatabase(conn, SQLiteDialect())
        repo = AsyncJobRepository(db)

        job = await repo.create(NewJob(title="Engineer", company_handle="acme", salary=90000, equity=0))
        print("created:", job)
        print("listed:", await repo.list(JobCriteria(title="eng", equity="0")))
        print("updated:", await repo.update(job.id, {"salary": 95000}))
        print("detail:", await repo.get(job.id))

        await repo.remove(job.id)
        try:
            await repo.get(job.id)
        except NotFoundError as exc:
            print("after remove:", exc)
    finally:
        conn.close()


if __name__ == "__main__":
    asyncio.run(main())
