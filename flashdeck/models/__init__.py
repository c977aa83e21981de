from flashdeck.models.comment import Comment
from flashdeck.models.flashcard import Flashcard
from flashdeck.models.group import Group, Membership
from flashdeck.models.post import Post
from flashdeck.models.set import Set, groups_sets
from flashdeck.models.user import User

__all__ = ["Comment", "Flashcard", "Group", "Membership", "Post", "Set", "User", "groups_sets"]
