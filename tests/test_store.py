"""
Tests for the store functions called directly with a session.
"""

import asyncio

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from flashdeck.core.errors import BadRequestError, NotFoundError
from flashdeck.crud import comments, groups, sets, users
from flashdeck.models.group import Group, Membership
from flashdeck.models.set import Set, groups_sets
from flashdeck.schemas.group import GroupCreate
from flashdeck.schemas.set import GroupSetCreate


def run(session_maker, fn):
    async def runner():
        async with session_maker() as db:
            return await fn(db)

    return asyncio.run(runner())


def test_group_creation_includes_membership(session_maker, ids):
    async def scenario(db):
        group = await groups.add(db, GroupCreate(name="G2"), created_by="u2")
        return group.id, await users.is_member(db, group.id, "u2")

    group_id, is_member = run(session_maker, scenario)
    assert group_id is not None
    assert is_member


def test_failed_group_creation_leaves_nothing_behind(session_maker, ids):
    async def scenario(db):
        with pytest.raises(IntegrityError):
            await groups.add(db, GroupCreate(name="Orphan"), created_by="ghost")
        group_count = await db.scalar(select(func.count()).select_from(Group))
        member_count = await db.scalar(select(func.count()).select_from(Membership))
        return group_count, member_count

    # only the seeded group and its two members remain
    assert run(session_maker, scenario) == (1, 2)


def test_group_set_is_associated(session_maker, ids):
    async def scenario(db):
        new_set = await groups.add_set(db, ids["group"], GroupSetCreate(name="Shared"), created_by="u3")
        return new_set.id, await sets.get_group_id(db, new_set.id)

    set_id, group_id = run(session_maker, scenario)
    assert group_id == ids["group"]


def test_group_set_for_missing_group(session_maker, ids):
    async def scenario(db):
        with pytest.raises(NotFoundError):
            await groups.add_set(db, 9999, GroupSetCreate(name="Lost"), created_by="u1")
        return await db.scalar(select(func.count()).select_from(Set).where(Set.name == "Lost"))

    assert run(session_maker, scenario) == 0


def test_failed_group_set_creation_leaves_nothing_behind(session_maker, ids):
    async def scenario(db):
        with pytest.raises(IntegrityError):
            await groups.add_set(db, ids["group"], GroupSetCreate(name="Ghostly"), created_by="ghost")
        set_count = await db.scalar(select(func.count()).select_from(Set).where(Set.name == "Ghostly"))
        link_count = await db.scalar(select(func.count()).select_from(groups_sets))
        return set_count, link_count

    # only the seeded group set stays linked
    assert run(session_maker, scenario) == (0, 1)


def test_votes_accumulate_independently(session_maker, ids):
    async def scenario(db):
        for _ in range(5):
            await comments.upvote(db, ids["comment"])
        await comments.downvote(db, ids["comment"])
        comment = await comments.get(db, ids["comment"])
        await db.refresh(comment)
        return comment.upvotes, comment.downvotes

    assert run(session_maker, scenario) == (5, 1)


def test_owner_cannot_leave_at_store_level(session_maker, ids):
    async def scenario(db):
        with pytest.raises(BadRequestError):
            await users.leave_group(db, "u1", ids["group"])
        return await users.is_member(db, ids["group"], "u1")

    assert run(session_maker, scenario)
