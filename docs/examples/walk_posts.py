"""Walk every page of a table with a timestamp + id keyset.

Run with::

    pip install -e ".[test]"
    python docs/examples/walk_posts.py
"""
from __future__ import annotations

import datetime
import logging

from sqlalchemy import DateTime, Integer, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from keyset_cursor.application.pagination import (
    KeysetPage,
    PaginationRequest,
    build_pagination,
)
from keyset_cursor.observability.logging import JsonLoggerFactory, get_logger


class Base(DeclarativeBase):
    pass


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime, nullable=False)


def main() -> None:
    JsonLoggerFactory.configure(level=logging.INFO)
    log = get_logger("walk_posts")

    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    start = datetime.datetime(2024, 1, 1)
    with Session(engine) as session:
        session.add_all(
            Post(id=i, created_at=start + datetime.timedelta(hours=i % 4)) for i in range(1, 26)
        )
        session.commit()

        request: PaginationRequest | None = PaginationRequest(
            cursors=[(Post.created_at, "desc"), (Post.id, "desc")],
            limit=6,
        )
        number = 0
        while request is not None:
            result = build_pagination(request)
            page = KeysetPage.of(session.scalars(result.apply(select(Post), lookahead=True)), request)
            number += 1
            log.info("page", number=number, ids=[p.id for p in page.items])
            request = page.next_request


if __name__ == "__main__":
    main()
