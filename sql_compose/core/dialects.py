"""SQL dialects: identifier quoting, placeholders, and substring matching."""

from __future__ import annotations


class Dialect:
    """Base dialect that defines quoting, placeholder, and matching behavior."""

    name: str = "generic"
    paramstyle: str = "numeric"
    quote_char: str = '"'
    substring_operator: str = "ILIKE"

    def q(self, ident: str) -> str:
        """Quote SQL identifier, doubling embedded quote characters."""

        escaped = ident.replace(self.quote_char, self.quote_char * 2)
        return f"{self.quote_char}{escaped}{self.quote_char}"

    def placeholder(self, index: int) -> str:
        """Return the placeholder for the 1-based positional `index`."""

        if self.paramstyle == "numeric":
            return f"${index}"
        if self.paramstyle == "qmark":
            return "?"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def substring_match(self, column: str, placeholder: str) -> str:
        """Return a case-insensitive `column contains value` condition."""

        return f"{column} {self.substring_operator} '%' || {placeholder} || '%'"


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`$N` parameters, `ILIKE`)."""

    name = "postgres"
    paramstyle = "numeric"
    quote_char = '"'
    substring_operator = "ILIKE"


class SQLiteDialect(Dialect):
    """SQLite dialect (`?` parameters, ASCII case-insensitive `LIKE`)."""

    name = "sqlite"
    paramstyle = "qmark"
    quote_char = '"'
    substring_operator = "LIKE"
