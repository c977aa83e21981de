"""
Shared fixtures for the API tests.

Every test gets its own SQLite database (aiosqlite) seeded with:
- users u1, u2, u3
- Set1 (u1, public), Set2 (u1, hidden), Set3 (u2, public) and GroupSet1
  (created by u1, owned by Group1), one flashcard in each
- Group1 owned by u1 with members u1 and u3
- a post by u3 in Group1 with a reply by u1
- a comment by u2 on Set1's flashcard
"""

import asyncio
import os

# configure before the app (and its settings) are imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["BCRYPT_WORK_FACTOR"] = "4"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import insert  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from flashdeck.core.database import enable_sqlite_foreign_keys, get_db, init_models  # noqa: E402
from flashdeck.core.security import Identity, create_access_token, hash_password  # noqa: E402
from flashdeck.main import app  # noqa: E402
from flashdeck.models import Comment, Flashcard, Group, Membership, Post, Set, User, groups_sets  # noqa: E402


def token_for(username: str) -> str:
    return create_access_token(Identity(username=username))


def auth(username: str) -> dict:
    """Authorization header for a seeded user."""
    return {"Authorization": f"Bearer {token_for(username)}"}


async def seed(session_maker) -> dict:
    async with session_maker() as db:
        db.add_all([
            User(username="u1", password=hash_password("password1"), first_name="User1", email="u1@email.com"),
            User(username="u2", password=hash_password("password2"), first_name="User2", email="u2@email.com"),
            User(username="u3", password=hash_password("password3"), first_name="User3", email="u3@email.com"),
        ])
        await db.flush()

        set1 = Set(name="Set1", description="Test set 1", side_one_name="Term", side_two_name="Definition", created_by="u1", hidden=False)
        set2 = Set(name="Set2", description="Test set 2", side_one_name="Term", side_two_name="Definition", created_by="u1", hidden=True)
        set3 = Set(name="Set3", description="Test set 3", side_one_name="Term", side_two_name="Definition", created_by="u2", hidden=False)
        group_set = Set(name="GroupSet1", description="Group set 1", side_one_name="Term", side_two_name="Definition", created_by="u1", hidden=False)
        db.add_all([set1, set2, set3, group_set])
        await db.flush()

        cards = [
            Flashcard(side_one_text="Term1", side_two_text="Definition1", set_id=set1.id),
            Flashcard(side_one_text="Term2", side_two_text="Definition2", set_id=set2.id),
            Flashcard(side_one_text="Term3", side_two_text="Definition3", set_id=set3.id),
            Flashcard(side_one_text="GroupTerm1", side_two_text="Definition4", set_id=group_set.id),
        ]
        db.add_all(cards)

        group = Group(name="Group1", description="Description1", created_by="u1")
        db.add(group)
        await db.flush()

        db.add_all([
            Membership(group_id=group.id, member_username="u1"),
            Membership(group_id=group.id, member_username="u3"),
        ])
        await db.execute(insert(groups_sets).values(group_id=group.id, set_id=group_set.id))

        post = Post(text="Post content", posted_by="u3", group_id=group.id)
        db.add(post)
        await db.flush()
        reply = Post(text="First reply", posted_by="u1", group_id=group.id, reply_to=post.id)
        comment = Comment(text="Comment", posted_by="u2", flashcard_id=cards[0].id)
        db.add_all([reply, comment])
        await db.commit()

        return {
            "set1": set1.id,
            "set2": set2.id,
            "set3": set3.id,
            "group_set": group_set.id,
            "card1": cards[0].id,
            "card2": cards[1].id,
            "card3": cards[2].id,
            "group_card": cards[3].id,
            "group": group.id,
            "post": post.id,
            "reply": reply.id,
            "comment": comment.id,
        }


@pytest.fixture
def session_maker(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'flashdeck.db'}", poolclass=NullPool)
    enable_sqlite_foreign_keys(engine)
    asyncio.run(init_models(engine))
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def ids(session_maker):
    return asyncio.run(seed(session_maker))


@pytest.fixture
def client(session_maker, ids):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
