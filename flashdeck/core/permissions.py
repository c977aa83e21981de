"""Access rules for sets, flashcards, groups, posts and comments.

The ``can_*``/``is_*`` predicates are pure decisions over rows that were
already loaded. The ``ensure_*`` coroutines load the target first, so an id
that does not resolve fails with NotFoundError before any rule is checked,
and raise UnauthorizedError when the rule denies the caller.

Sets that belong to a group are governed by group membership; for those the
set's creator and hidden flag do not matter.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.errors import BadRequestError, NotFoundError, UnauthorizedError
from flashdeck.core.security import Identity
from flashdeck.crud import comments, flashcards, groups, posts, sets, users
from flashdeck.models.comment import Comment
from flashdeck.models.flashcard import Flashcard
from flashdeck.models.group import Group
from flashdeck.models.post import Post
from flashdeck.models.set import Set

logger = logging.getLogger(__name__)


# ====== Decisions ======
def can_view_set(identity: Identity, set_: Set, group_id: int | None = None, is_member: bool = False) -> bool:
    if group_id is not None:
        return is_member
    return not set_.hidden or identity.username == set_.created_by


def can_edit_set(identity: Identity, set_: Set, group_id: int | None = None, is_member: bool = False) -> bool:
    if group_id is not None:
        return is_member
    # visibility first: a hidden set is only reachable by its creator anyway
    if not can_view_set(identity, set_):
        return False
    return identity.username == set_.created_by


def is_group_owner(identity: Identity, group: Group) -> bool:
    return identity.username == group.created_by


def is_author(identity: Identity, posted_by: str) -> bool:
    return identity.username == posted_by


def can_leave_group(identity: Identity, group: Group, is_member: bool) -> bool:
    return is_member and not is_group_owner(identity, group)


def is_current_user(identity: Identity, username: str) -> bool:
    return identity.username == username


def _deny(identity: Identity, action: str, message: str | None = None):
    logger.info("denied %s to %s", action, identity.username)
    raise UnauthorizedError(message)


# ====== Guards ======
async def _load_set(db: AsyncSession, identity: Identity, set_id: int):
    set_ = await sets.get(db, set_id)
    group_id = await sets.get_group_id(db, set_id)
    is_member = group_id is not None and await users.is_member(db, group_id, identity.username)
    return set_, group_id, is_member


async def ensure_set_viewer(db: AsyncSession, identity: Identity, set_id: int) -> Set:
    set_, group_id, is_member = await _load_set(db, identity, set_id)
    if not can_view_set(identity, set_, group_id, is_member):
        _deny(identity, f"read on set {set_id}")
    return set_


async def ensure_set_editor(db: AsyncSession, identity: Identity, set_id: int) -> Set:
    set_, group_id, is_member = await _load_set(db, identity, set_id)
    if not can_edit_set(identity, set_, group_id, is_member):
        _deny(identity, f"write on set {set_id}")
    return set_


async def ensure_flashcard_viewer(db: AsyncSession, identity: Identity, flashcard_id: int) -> Flashcard:
    card = await flashcards.get(db, flashcard_id)
    await ensure_set_viewer(db, identity, card.set_id)
    return card


async def ensure_flashcard_editor(db: AsyncSession, identity: Identity, flashcard_id: int) -> Flashcard:
    """The owning set always comes from the stored flashcard, never from the request."""
    card = await flashcards.get(db, flashcard_id)
    await ensure_set_editor(db, identity, card.set_id)
    return card


async def ensure_group_member(db: AsyncSession, identity: Identity, group_id: int) -> Group:
    group = await groups.get(db, group_id)
    if not await users.is_member(db, group_id, identity.username):
        _deny(identity, f"member access to group {group_id}")
    return group


async def ensure_group_owner(db: AsyncSession, identity: Identity, group_id: int) -> Group:
    group = await groups.get(db, group_id)
    if not is_group_owner(identity, group):
        _deny(identity, f"owner access to group {group_id}")
    return group


async def ensure_post_author(db: AsyncSession, identity: Identity, group_id: int, post_id: int) -> Post:
    await groups.get(db, group_id)
    post = await posts.get_in_group(db, group_id, post_id)
    if not is_author(identity, post.posted_by):
        _deny(identity, f"edit of post {post_id}", "You cannot edit a post you didn't write.")
    return post


async def ensure_comment_author(db: AsyncSession, identity: Identity, comment_id: int) -> Comment:
    comment = await comments.get(db, comment_id)
    if not is_author(identity, comment.posted_by):
        _deny(identity, f"edit of comment {comment_id}", "You can't edit a comment you didn't make.")
    return comment


async def ensure_can_leave(db: AsyncSession, identity: Identity, group_id: int) -> Group:
    group = await groups.get(db, group_id)
    is_member = await users.is_member(db, group_id, identity.username)
    if not can_leave_group(identity, group, is_member):
        if is_group_owner(identity, group):
            raise BadRequestError("You can't leave a group if you own it!")
        raise NotFoundError(f"No user with username {identity.username} in group {group_id}")
    return group


def ensure_current_user(identity: Identity, username: str):
    if not is_current_user(identity, username):
        _deny(identity, f"self-service action for {username}")


async def ensure_group_set(db: AsyncSession, group_id: int, set_id: int) -> Set:
    set_ = await sets.get(db, set_id)
    if await sets.get_group_id(db, set_id) != group_id:
        raise NotFoundError(f"No set with id {set_id} in group {group_id}")
    return set_


async def ensure_group_flashcard(db: AsyncSession, group_id: int, flashcard_id: int) -> Flashcard:
    card = await flashcards.get(db, flashcard_id)
    if await sets.get_group_id(db, card.set_id) != group_id:
        raise NotFoundError(f"No flashcard with id {flashcard_id} in group {group_id}")
    return card
