"""Teacher records stored with SQLAlchemy, with create, query and transaction examples."""

import json
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from datetime import datetime

from sqlalchemy import (
    JSON,
    CheckConstraint,
    DateTime,
    Integer,
    LargeBinary,
    String,
    create_engine,
    event,
    func,
    or_,
    select,
    text,
)
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, composite, mapped_column
from sqlalchemy.types import TypeDecorator

_MAX_OPEN_CONNS = 10
_MAX_IDLE_CONNS = 5
_CONN_MAX_LIFETIME = 3600
_BATCH_SIZE = 2
_MAP_OMITTED = ("birthday", "roles", "job_info2")


@dataclass
class Job:
    """A job title and where it is held."""

    title: str | None = ""
    location: str | None = ""


class _UnixTime(TypeDecorator):
    """Unix seconds in Python, a timestamp column in the database."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else datetime.fromtimestamp(value)

    def process_result_value(self, value, dialect):
        return None if value is None else int(value.timestamp())


class _JobBytes(TypeDecorator):
    """A ``Job`` serialised into a binary column."""

    impl = LargeBinary
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else json.dumps(asdict(value)).encode("utf-8")

    def process_result_value(self, value, dialect):
        return None if value is None else Job(**json.loads(value))


class _Base(DeclarativeBase):
    pass


class Teacher(_Base):
    """A teacher row with soft-delete timestamps."""

    __tablename__ = "teachers"
    __table_args__ = (CheckConstraint("age > 30", name="chk_teachers_age"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    created_at: Mapped[datetime | None] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime, index=True)
    name: Mapped[str | None] = mapped_column(String(256))
    email: Mapped[str | None] = mapped_column(String(256))
    age: Mapped[int | None] = mapped_column(Integer)
    working_years: Mapped[int | None] = mapped_column(Integer)
    birthday: Mapped[int | None] = mapped_column(_UnixTime)
    stu_number: Mapped[str | None] = mapped_column(String(256))
    roles: Mapped[list | None] = mapped_column(JSON)
    job_info: Mapped[Job] = composite(
        mapped_column("job_title", String(256), nullable=True),
        mapped_column("job_location", String(256), nullable=True),
    )
    job_info2: Mapped[Job | None] = mapped_column(_JobBytes)

    def __repr__(self):
        return (
            f"Teacher(id={self.id!r}, name={self.name!r}, age={self.age!r}, "
            f"email={self.email!r}, roles={self.roles!r}, job_info={self.job_info!r})"
        )


def _enable_sqlite_savepoints(engine):
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, _record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(connection):
        connection.exec_driver_sql("BEGIN")


def make_engine(url):
    """Create an engine for ``url`` with a bounded connection pool."""
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        engine = create_engine(parsed)
        _enable_sqlite_savepoints(engine)
        return engine
    return create_engine(
        parsed,
        pool_size=_MAX_IDLE_CONNS,
        max_overflow=_MAX_OPEN_CONNS - _MAX_IDLE_CONNS,
        pool_recycle=_CONN_MAX_LIFETIME,
    )


def migrate(engine):
    """Create the tables that do not exist yet."""
    _Base.metadata.create_all(engine)


def _template_values():
    return {
        "name": "nick",
        "age": 40,
        "working_years": 10,
        "email": "nick@example.com",
        "birthday": int(time.time()),
        "stu_number": "10",
        "roles": ["普通用户", "讲师"],
        "job_info": Job(title="讲师", location="湖南长沙"),
        "job_info2": Job(title="讲师", location="湖南长沙"),
    }


def template_teacher():
    """Return a new, unsaved teacher filled with the sample values."""
    return Teacher(**_template_values())


def _chunks(items, size):
    for start in range(0, len(items), size):
        yield items[start:start + size]


def create_records(session):
    """Insert sample teachers: full, selected fields, omitted fields, then a batch."""
    full = template_teacher()
    session.add(full)
    session.commit()
    print("CreateRecord():", full)

    values = _template_values()
    selected = Teacher(**{key: values[key] for key in ("name", "age")})
    session.add(selected)
    session.commit()
    print("CreateRecord():", selected)

    values = _template_values()
    omitted = Teacher(**{k: v for k, v in values.items() if k not in ("email", "birthday")})
    session.add(omitted)
    session.commit()
    print("CreateRecord():", omitted)

    batch = [Teacher(name="king", age=40), Teacher(name="daren", age=40), Teacher(name="nick", age=40)]
    for chunk in _chunks(batch, _BATCH_SIZE):
        session.add_all(chunk)
        session.flush()
    session.commit()
    for teacher in batch:
        print(teacher.id)

    return [full, selected, omitted, *batch]


def _live(statement):
    return statement.where(Teacher.deleted_at.is_(None))


def query(session):
    """Run the sample single- and multi-row queries and return their results by name."""
    first = session.scalars(_live(select(Teacher)).order_by(Teacher.id).limit(1)).first()
    print(first)
    last = session.scalars(_live(select(Teacher)).order_by(Teacher.id.desc()).limit(1)).first()
    print(last)
    take = session.scalars(_live(select(Teacher)).limit(1)).first()
    print(take)

    columns = [c for c in Teacher.__table__.c if c.name not in _MAP_OMITTED]
    row = session.execute(
        select(*columns).where(Teacher.deleted_at.is_(None)).order_by(Teacher.id).limit(1)
    ).mappings().first()
    first_as_map = dict(row) if row is not None else None
    print(first_as_map)

    row = session.execute(text("SELECT * FROM teachers LIMIT 1")).mappings().first()
    take_as_map = dict(row) if row is not None else None
    print(take_as_map)

    by_name = list(
        session.scalars(
            _live(select(Teacher))
            .where(or_(Teacher.name == "nick", Teacher.name == "king"))
            .order_by(Teacher.id.desc())
            .limit(10)
        )
    )
    print(len(by_name), by_name)

    return {
        "first": first,
        "last": last,
        "take": take,
        "first_as_map": first_as_map,
        "take_as_map": take_as_map,
        "by_name": by_name,
    }


@contextmanager
def _transaction(session):
    if session.in_transaction():
        with session.begin_nested():
            yield
    else:
        with session.begin():
            yield


class _Rollback(Exception):
    pass


def transaction(session):
    """Insert two sample teachers in one transaction."""
    first, second = template_teacher(), template_teacher()
    with _transaction(session):
        session.add(first)
        session.flush()
        session.add(second)
        session.flush()
    return [first, second]


def nested_transaction(session):
    """Insert sample teachers where one nested transaction is rolled back."""
    t, t1, t2, t3 = (template_teacher() for _ in range(4))
    with _transaction(session):
        session.add(t)
        session.flush()

        # Rolling back the savepoint leaves the outer transaction intact.
        try:
            with session.begin_nested():
                session.add(t1)
                session.flush()
                raise _Rollback("rollback t1")
        except _Rollback:
            pass

        with session.begin_nested():
            session.add(t2)
            session.flush()

        session.add(t3)
        session.flush()
    return [t, t2, t3]


def count_teachers(session):
    """Return the number of teacher rows, soft-deleted ones included."""
    return session.scalar(select(func.count()).select_from(Teacher))