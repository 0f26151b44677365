from __future__ import annotations

import sqlite3
import unittest

from sql_compose.core.dialects import Dialect, PostgresDialect, SQLiteDialect
from sql_compose.core.errors import NotFoundError
from sql_compose.core.repositories import AsyncJobRepository
from sql_compose.ports.db_api.async_database import AsyncDatabase


class _InvalidDialect(Dialect):
    paramstyle = "invalid"


class _BacktickDialect(Dialect):
    quote_char = "`"


class _FakeAsyncCursor:
    def __init__(self, conn, rows):
        self._conn = conn
        self._rows = rows
        self.description = conn.description
        self.rowcount = conn.rowcount
        self.closed = False

    async def execute(self, sql, params=None):  # noqa: ANN001,ANN201
        self._conn.executed.append((sql, params))

    async def fetchone(self):  # noqa: ANN201
        return self._rows[0] if self._rows else None

    async def fetchall(self):  # noqa: ANN201
        return list(self._rows)

    async def close(self) -> None:
        self.closed = True


class _FakeAsyncConn:
    def __init__(self, rows, *, rowcount=-1, description=(("id",), ("title",))):
        self.rows = rows
        self.rowcount = rowcount
        self.description = description
        self.executed: list[tuple[str, object]] = []
        self.cursors: list[_FakeAsyncCursor] = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    async def cursor(self) -> _FakeAsyncCursor:
        cur = _FakeAsyncCursor(self, self.rows)
        self.cursors.append(cur)
        return cur

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1

    async def close(self) -> None:
        self.closed = True


class DialectTests(unittest.TestCase):
    def test_builtin_dialect_properties(self) -> None:
        self.assertEqual(PostgresDialect().placeholder(3), "$3")
        self.assertEqual(SQLiteDialect().placeholder(3), "?")
        self.assertEqual(PostgresDialect().q("title"), '"title"')
        self.assertEqual(_BacktickDialect().q("a`b"), "`a``b`")

    def test_invalid_paramstyle_raises(self) -> None:
        with self.assertRaises(ValueError):
            _InvalidDialect().placeholder(1)

    def test_substring_match(self) -> None:
        self.assertEqual(
            PostgresDialect().substring_match("title", "$1"),
            "title ILIKE '%' || $1 || '%'",
        )
        self.assertEqual(
            SQLiteDialect().substring_match("title", "?"),
            "title LIKE '%' || ? || '%'",
        )


class AsyncDatabaseSQLiteTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self.conn = sqlite3.connect(":memory:")
        self.db = AsyncDatabase(self.conn, SQLiteDialect())

    async def asyncTearDown(self) -> None:
        self.conn.close()

    async def test_execute_fetchone_fetchall(self) -> None:
        await self.db.execute('CREATE TABLE "t" ("id" INTEGER, "name" TEXT);')
        await self.db.execute('INSERT INTO "t" ("id", "name") VALUES (?, ?);', [1, "a"])
        await self.db.execute('INSERT INTO "t" ("id", "name") VALUES (?, ?);', [2, "b"])

        row = await self.db.fetchone('SELECT * FROM "t" WHERE "id" = ?;', [1])
        rows = await self.db.fetchall('SELECT * FROM "t" ORDER BY "id" ASC;')
        missing = await self.db.fetchone('SELECT * FROM "t" WHERE "id" = ?;', [9])

        self.assertEqual(row, {"id": 1, "name": "a"})
        self.assertEqual([r["name"] for r in rows], ["a", "b"])
        self.assertIsNone(missing)

    async def test_transaction_rolls_back_on_error(self) -> None:
        await self.db.execute('CREATE TABLE "t" ("id" INTEGER);')

        with self.assertRaises(RuntimeError):
            async with self.db.transaction():
                await self.db.execute('INSERT INTO "t" ("id") VALUES (1);')
                raise RuntimeError("boom")

        count = await self.db.fetchone('SELECT COUNT(*) AS "count" FROM "t";')
        self.assertEqual(count["count"], 0)

    async def test_execute_reports_affected_rows(self) -> None:
        await self.db.execute('CREATE TABLE "t" ("id" INTEGER);')
        await self.db.execute('INSERT INTO "t" ("id") VALUES (1), (2), (3);')

        affected = await self.db.execute('DELETE FROM "t" WHERE "id" > ?;', [1])

        self.assertEqual(affected, 2)

    async def test_backend_errors_propagate(self) -> None:
        with self.assertRaises(sqlite3.OperationalError):
            await self.db.execute("SELECT * FROM missing_table")

    async def test_row_factory_mapping_is_supported(self) -> None:
        self.conn.row_factory = sqlite3.Row
        row = await self.db.fetchone("SELECT 1 AS one")

        self.assertEqual(row["one"], 1)

    async def test_closed_adapter_rejects_queries(self) -> None:
        await self.db.aclose()

        with self.assertRaises(RuntimeError):
            await self.db.execute("SELECT 1")


class AsyncDatabaseAsyncDriverTests(unittest.IsolatedAsyncioTestCase):
    async def test_awaits_async_cursor_and_closes_it(self) -> None:
        conn = _FakeAsyncConn([(1, "eng")])
        db = AsyncDatabase(conn, PostgresDialect())

        rows = await db.fetchall("SELECT id, title FROM jobs WHERE id = $1", [1])

        self.assertEqual(rows, [{"id": 1, "title": "eng"}])
        self.assertEqual(conn.executed, [("SELECT id, title FROM jobs WHERE id = $1", [1])])
        self.assertTrue(conn.cursors[0].closed)

    async def test_transaction_commits_and_rolls_back(self) -> None:
        conn = _FakeAsyncConn([])
        db = AsyncDatabase(conn, PostgresDialect())

        async with db.transaction():
            await db.execute("SELECT 1")
        with self.assertRaises(ValueError):
            async with db.transaction():
                raise ValueError("boom")

        self.assertEqual(conn.commits, 1)
        self.assertEqual(conn.rollbacks, 1)

    async def test_async_context_manager_closes_connection(self) -> None:
        conn = _FakeAsyncConn([])

        async with AsyncDatabase(conn, PostgresDialect()):
            pass

        self.assertTrue(conn.closed)

    async def test_tuple_rows_without_description_raise(self) -> None:
        conn = _FakeAsyncConn([(1, 2)], description=None)
        db = AsyncDatabase(conn, PostgresDialect())

        with self.assertRaises(TypeError):
            await db.fetchone("SELECT 1, 2")
        self.assertTrue(conn.cursors[0].closed)

    async def test_execute_returns_rowcount_and_closes_cursor(self) -> None:
        conn = _FakeAsyncConn([], rowcount=2)
        db = AsyncDatabase(conn, PostgresDialect())

        affected = await db.execute("DELETE FROM jobs WHERE salary < $1", [10])

        self.assertEqual(affected, 2)
        self.assertTrue(conn.cursors[0].closed)

    async def test_job_removal_closes_its_cursor(self) -> None:
        for rowcount in (1, 0):
            with self.subTest(rowcount=rowcount):
                conn = _FakeAsyncConn([], rowcount=rowcount)
                repo = AsyncJobRepository(AsyncDatabase(conn, PostgresDialect()))

                if rowcount:
                    await repo.remove(1)
                else:
                    with self.assertRaises(NotFoundError):
                        await repo.remove(1)

                self.assertEqual(conn.executed, [("DELETE FROM jobs WHERE id = $1", [1])])
                self.assertTrue(conn.cursors[0].closed)


if __name__ == "__main__":
    unittest.main()
