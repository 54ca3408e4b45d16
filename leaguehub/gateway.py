"""Generic table access for the admin dashboard and the public listing.

The gateway speaks in table names and plain record dicts, the way a hosted
REST store would: callers never see ORM objects. Every failure surfaces as a
``RemoteError`` after the session has been rolled back.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from leaguehub.errors import RecordNotFound, RemoteError
from leaguehub.extensions import db
from leaguehub.models import City, League, Sport
from leaguehub.schemas import CitySchema, LeagueSchema, SportSchema

logger = logging.getLogger(__name__)

# table name -> (model, record schema, embeddable many-to-one relations)
TABLES = {
    "cities": (City, CitySchema, ()),
    "sports": (Sport, SportSchema, ()),
    "leagues": (League, LeagueSchema, ("city", "sport")),
}


class DataGateway:
    def __init__(self, tables=None):
        self.tables = tables or TABLES

    # ── Lookups ──────────────────────────────────────────────────────────

    def _table(self, table):
        try:
            return self.tables[table]
        except KeyError:
            raise RemoteError(f'relation "{table}" does not exist', table=table) from None

    def _column(self, table, name):
        model = self._table(table)[0]
        column = model.__table__.columns.get(name)
        if column is None:
            raise RemoteError(f"column {table}.{name} does not exist", table=table)
        return column

    def _serializer(self, table, relations):
        _, schema_cls, known = self._table(table)
        for relation in relations:
            if relation not in known:
                raise RemoteError(
                    f"Could not find a relationship between '{table}' and '{relation}'",
                    table=table,
                )
        return schema_cls(exclude=tuple(r for r in known if r not in relations))

    def _get(self, table, record_id):
        model = self._table(table)[0]
        try:
            row = db.session.get(model, record_id)
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise RemoteError(str(getattr(exc, "orig", None) or exc), table=table) from exc
        if row is None:
            raise RecordNotFound(f"No {table} row with id {record_id}", table=table)
        return row

    def _commit(self, table, action):
        try:
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.debug("%s on %s failed: %s", action, table, exc)
            raise RemoteError(str(getattr(exc, "orig", None) or exc), table=table) from exc

    # ── Operations ───────────────────────────────────────────────────────

    def select(self, table, columns="*", relations=(), order_by=None, filters=None):
        """Return the rows of ``table`` as dicts, in query order.

        ``order_by`` is a column name or a ``(column, "asc" | "desc")`` pair;
        ``filters`` maps column names to values matched by equality.
        """
        model = self._table(table)[0]
        schema = self._serializer(table, relations)

        query = model.query
        for relation in relations:
            query = query.options(selectinload(getattr(model, relation)))
        for name, value in (filters or {}).items():
            query = query.filter(self._column(table, name) == value)

        if order_by:
            name, direction = (order_by, "asc") if isinstance(order_by, str) else order_by
            column = self._column(table, name)
            if direction == "desc":
                query = query.order_by(column.desc(), model.id.desc())
            else:
                query = query.order_by(column.asc(), model.id.asc())

        try:
            rows = query.all()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise RemoteError(str(getattr(exc, "orig", None) or exc), table=table) from exc

        records = schema.dump(rows, many=True)
        if columns == "*":
            return records

        keep = [name.strip() for name in columns.split(",") if name.strip()]
        for name in keep:
            self._column(table, name)
        keep.extend(relations)
        return [{key: record[key] for key in keep if key in record} for record in records]

    def insert(self, table, record, relations=()):
        model = self._table(table)[0]
        schema = self._serializer(table, relations)
        for name in record:
            self._column(table, name)

        row = model(**record)
        db.session.add(row)
        self._commit(table, "insert")
        return schema.dump(row)

    def update(self, table, record_id, patch, relations=()):
        schema = self._serializer(table, relations)
        for name in patch:
            self._column(table, name)

        row = self._get(table, record_id)

        for name, value in patch.items():
            setattr(row, name, value)
        self._commit(table, "update")
        return schema.dump(row)

    def delete(self, table, record_id):
        row = self._get(table, record_id)

        db.session.delete(row)
        self._commit(table, "delete")
        return True
