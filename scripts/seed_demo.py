#!/usr/bin/env python
"""Seed a demo account with links, a link list and random clicks.

Click counters are kept equal to the number of generated click events so
the analytics totals and the daily series agree.

Usage:
    python scripts/seed_demo.py --username demo --password demo-password --days 30 --seed 42
"""

from __future__ import annotations

import argparse
import asyncio
import random
import sys
from datetime import UTC, datetime, timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import linkhub.features.links  # noqa: F401
from linkhub.core.config import get_settings
from linkhub.features.accounts.models import User
from linkhub.features.accounts.security import hash_password
from linkhub.features.links.models import ClickEvent, LinkList, LinkListItem, Shortlink

SHORTLINKS = [
    ("https://docs.python.org/3/", "py-docs"),
    ("https://fastapi.tiangolo.com/", None),
    ("https://www.sqlalchemy.org/", "sqla"),
    ("https://www.structlog.org/", None),
    ("https://pydantic.dev/", None),
    ("https://alembic.sqlalchemy.org/", None),
]

LIST_ITEMS = [
    ("Blog", "https://example.com/blog"),
    ("Newsletter", "https://example.com/newsletter"),
    ("Talks", "https://example.com/talks"),
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed LinkHub demo data.")
    parser.add_argument("--username", default="demo")
    parser.add_argument("--email", default="demo@example.com")
    parser.add_argument("--password", default="demo-password")
    parser.add_argument("--days", type=int, default=30, help="Spread clicks over this many days.")
    parser.add_argument("--max-clicks", type=int, default=40, help="Upper bound of clicks per link.")
    parser.add_argument("--seed", type=int, default=42)
    return parser.parse_args(argv)


def random_clicks(rng: random.Random, count: int, days: int, now: datetime) -> list[datetime]:
    span = timedelta(days=days).total_seconds()
    return [now - timedelta(seconds=rng.uniform(0, span)) for _ in range(count)]


async def seed(session: AsyncSession, args: argparse.Namespace) -> User:
    """Create the demo user and its data. Fails if the user already exists."""
    existing = await session.execute(select(User).where(User.username == args.username))
    if existing.scalar_one_or_none() is not None:
        raise SystemExit(f"User '{args.username}' already exists")

    rng = random.Random(args.seed)
    now = datetime.now(UTC)

    user = User(username=args.username, email=args.email, password_hash=hash_password(args.password))
    session.add(user)
    await session.flush()

    for index, (url, alias) in enumerate(SHORTLINKS):
        times = random_clicks(rng, rng.randint(0, args.max_clicks), args.days, now)
        link = Shortlink(
            user_id=user.id,
            original_url=url,
            short_code=f"{args.username[:4]}{index:03d}{rng.randrange(16**4):04x}",
            custom_alias=f"{args.username}-{alias}" if alias else None,
            clicks=len(times),
            is_active=index % 5 != 4,
        )
        link.click_events = [ClickEvent(clicked_at=t) for t in times]
        session.add(link)

    link_list = LinkList(user_id=user.id, title=f"{args.username}'s links")
    for position, (title, url) in enumerate(LIST_ITEMS):
        times = random_clicks(rng, rng.randint(0, args.max_clicks), args.days, now)
        item = LinkListItem(title=title, url=url, position=position, clicks=len(times))
        item.click_events = [ClickEvent(clicked_at=t) for t in times]
        link_list.items.append(item)
    session.add(link_list)

    await session.commit()
    return user


async def main_async(args: argparse.Namespace) -> int:
    engine = create_async_engine(get_settings().database_url)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_maker() as session:
            user = await seed(session, args)
        print(f"Seeded demo user '{user.username}' (id={user.id})")
        return 0
    finally:
        await engine.dispose()


def main():
    sys.exit(asyncio.run(main_async(parse_args())))


if __name__ == "__main__":
    main()
