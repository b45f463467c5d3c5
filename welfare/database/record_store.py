from typing import Any

import psycopg
from psycopg import sql
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from welfare.database.connection import get_connection
from welfare.database.exceptions import RecordNotFoundError, RecordStoreError

TABLES = frozenset({"profiles", "schemes", "applications", "grievances"})

# embed name -> (related table, foreign key column on the queried table)
EMBEDS: dict[str, tuple[str, str]] = {
    "scheme": ("schemes", "scheme_id"),
}


class RecordStore:
    """Table-scoped insert, query and update over the relational store.

    Every returned row is a plain dict. When ``embed`` names a relation, the
    related row is joined on its foreign key and returned under that name
    (``None`` when the foreign key is empty).
    """

    def insert(
        self,
        table: str,
        record: dict[str, Any],
        embed: str | None = None,
    ) -> dict[str, Any]:
        """Insert one row and return it with its store-assigned columns.

        Raises:
            RecordStoreError: if the store rejects the row.
        """
        self._check_table(table)
        if not record:
            raise ValueError("record must contain at least one column")
        columns = list(record)
        statement: sql.Composable = sql.SQL(
            "INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING *"
        ).format(
            table=sql.Identifier(table),
            columns=sql.SQL(", ").join(sql.Identifier(c) for c in columns),
            values=sql.SQL(", ").join(sql.Placeholder() * len(columns)),
        )
        if embed is not None:
            statement = sql.SQL("WITH inserted AS ({insert}) {select}").format(
                insert=statement,
                select=self._select(sql.Identifier("inserted"), embed),
            )
        params = [self._adapt(record[c]) for c in columns]
        row = self._execute_one(statement, params, commit=True)
        if row is None:
            raise RecordStoreError(f"Insert into {table} returned no row")
        return row

    def query(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
        embed: str | None = None,
    ) -> list[dict[str, Any]]:
        """Select rows matching equality filters.

        A ``None`` filter value matches NULL; a list value matches array
        columns containing every listed element.
        """
        self._check_table(table)
        where, params = self._where(filters or {})
        statement = sql.SQL("{select}{where}").format(
            select=self._select(sql.Identifier(table), embed),
            where=where,
        )
        if order_by is not None:
            statement = sql.SQL("{base} ORDER BY {column} {direction}").format(
                base=statement,
                column=sql.Identifier("t", order_by),
                direction=sql.SQL("DESC" if descending else "ASC"),
            )
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(statement, params)
                    return cur.fetchall()
        except psycopg.Error as exc:
            raise RecordStoreError(f"Query on {table} failed: {exc}") from exc

    def find_one(
        self,
        table: str,
        filters: dict[str, Any],
        embed: str | None = None,
    ) -> dict[str, Any] | None:
        rows = self.query(table, filters, embed=embed)
        return rows[0] if rows else None

    def update(
        self,
        table: str,
        record_id: str,
        changes: dict[str, Any],
    ) -> dict[str, Any]:
        """Update columns of one row by id.

        Raises:
            RecordNotFoundError: if no row with this id exists.
            RecordStoreError: if the store rejects the update.
        """
        self._check_table(table)
        if not changes:
            raise ValueError("changes must contain at least one column")
        columns = list(changes)
        statement = sql.SQL("UPDATE {table} SET {assignments} WHERE id = %s RETURNING *").format(
            table=sql.Identifier(table),
            assignments=sql.SQL(", ").join(
                sql.SQL("{} = %s").format(sql.Identifier(c)) for c in columns
            ),
        )
        params = [self._adapt(changes[c]) for c in columns] + [record_id]
        row = self._execute_one(statement, params, commit=True)
        if row is None:
            raise RecordNotFoundError(f"{table} row {record_id} not found")
        return row

    def _execute_one(
        self,
        statement: sql.Composable,
        params: list[Any],
        commit: bool,
    ) -> dict[str, Any] | None:
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(statement, params)
                    row = cur.fetchone()
                if commit:
                    conn.commit()
        except psycopg.Error as exc:
            raise RecordStoreError(str(exc)) from exc
        return row

    @staticmethod
    def _select(source: sql.Composable, embed: str | None) -> sql.Composable:
        if embed is None:
            return sql.SQL("SELECT t.* FROM {source} AS t").format(source=source)
        if embed not in EMBEDS:
            raise ValueError(f"Unknown embed '{embed}'. Choose from: {list(EMBEDS)}")
        related, foreign_key = EMBEDS[embed]
        return sql.SQL(
            "SELECT t.*, CASE WHEN r.id IS NULL THEN NULL ELSE row_to_json(r.*) END AS {alias} "
            "FROM {source} AS t LEFT JOIN {related} AS r ON r.id = {foreign_key}"
        ).format(
            alias=sql.Identifier(embed),
            source=source,
            related=sql.Identifier(related),
            foreign_key=sql.Identifier("t", foreign_key),
        )

    @staticmethod
    def _where(filters: dict[str, Any]) -> tuple[sql.Composable, list[Any]]:
        if not filters:
            return sql.SQL(""), []
        clauses: list[sql.Composable] = []
        params: list[Any] = []
        for column, value in filters.items():
            identifier = sql.Identifier("t", column)
            if value is None:
                clauses.append(sql.SQL("{} IS NULL").format(identifier))
            elif isinstance(value, list):
                clauses.append(sql.SQL("{} @> %s").format(identifier))
                params.append(value)
            else:
                clauses.append(sql.SQL("{} = %s").format(identifier))
                params.append(value)
        return sql.SQL(" WHERE ") + sql.SQL(" AND ").join(clauses), params

    @staticmethod
    def _adapt(value: Any) -> Any:
        if isinstance(value, dict):
            return Jsonb(value)
        return value

    @staticmethod
    def _check_table(table: str) -> None:
        if table not in TABLES:
            raise ValueError(f"Unknown table '{table}'. Choose from: {sorted(TABLES)}")
