"""
Users related methods of the Vimeo API.

Every ``uid`` argument addresses the authenticated user when it's ``None`` or
empty, and the user with that id otherwise.

Vimeo API docs: https://developer.vimeo.com/api/reference/users
"""

from typing import TYPE_CHECKING

from ..data import Category, Channel, Feed, Group, User, Video
from ..operations.resolver import SubjectLike
from ..options import (
    ListCategoryOptions,
    ListChannelOptions,
    ListFeedOptions,
    ListGroupOptions,
    ListUserOptions,
    ListVideoOptions,
    UserRequest,
)
from .base import ResourceService

if TYPE_CHECKING:
    from ..operations.executor import Response


class UsersService(ResourceService):
    resource = "users"

    def search(
        self, options: ListUserOptions | None = None
    ) -> tuple[list[User], "Response"]:
        """
        Search users.

        Vimeo API docs: https://developer.vimeo.com/api/reference/users#search_users
        """
        return self._list(User, self.resource, options)

    def get(self, uid: SubjectLike = None) -> tuple[User, "Response"]:
        """
        Show one user.

        Raises:
            HTTPStatusError: With status 404 if the user doesn't exist
        """
        return self._retrieve(User, self.resolver.path(uid))

    def edit(self, uid: SubjectLike, request: UserRequest) -> tuple[User, "Response"]:
        """
        Edit one user.

        Only the fields set on ``request`` are sent, everything else is left
        untouched on the server.
        """
        return self._partial_update(User, self.resolver.path(uid), request.as_data())

    def list_appearances(
        self, uid: SubjectLike = None, options: ListVideoOptions | None = None
    ) -> tuple[list[Video], "Response"]:
        """
        List all videos a user is credited in.
        """
        return self._list(Video, self.resolver.path(uid, "appearances"), options)

    # Categories

    def list_categories(
        self, uid: SubjectLike = None, options: ListCategoryOptions | None = None
    ) -> tuple[list[Category], "Response"]:
        """
        List the categories a user is subscribed to.
        """
        return self._list(Category, self.resolver.path(uid, "categories"), options)

    def subscribe_category(self, uid: SubjectLike, category: str) -> "Response":
        return self._toggle("PUT", self.resolver.path(uid, "categories", category))

    def unsubscribe_category(self, uid: SubjectLike, category: str) -> "Response":
        return self._toggle("DELETE", self.resolver.path(uid, "categories", category))

    # Channels

    def list_channels(
        self, uid: SubjectLike = None, options: ListChannelOptions | None = None
    ) -> tuple[list[Channel], "Response"]:
        """
        List the channels a user is subscribed to.
        """
        return self._list(Channel, self.resolver.path(uid, "channels"), options)

    def subscribe_channel(self, uid: SubjectLike, channel_id: str) -> "Response":
        return self._toggle("PUT", self.resolver.path(uid, "channels", channel_id))

    def unsubscribe_channel(self, uid: SubjectLike, channel_id: str) -> "Response":
        return self._toggle("DELETE", self.resolver.path(uid, "channels", channel_id))

    # Feed

    def feed(
        self, uid: SubjectLike = None, options: ListFeedOptions | None = None
    ) -> tuple[list[Feed], "Response"]:
        """
        List the feed of a user.

        Vimeo API docs: https://developer.vimeo.com/api/reference/users#get_feed
        """
        return self._list(Feed, self.resolver.path(uid, "feed"), options)

    # Followers

    def list_followers(
        self, uid: SubjectLike = None, options: ListUserOptions | None = None
    ) -> tuple[list[User], "Response"]:
        return self._list(User, self.resolver.path(uid, "followers"), options)

    def list_followed(
        self, uid: SubjectLike = None, options: ListUserOptions | None = None
    ) -> tuple[list[User], "Response"]:
        """
        List the users a user is following.
        """
        return self._list(User, self.resolver.path(uid, "following"), options)

    def follow_user(self, uid: SubjectLike, follow_id: str) -> "Response":
        """
        Follow a user.

        Following someone who is already followed is not an error; the status
        code of the second call is whatever the server returns.
        """
        return self._toggle("PUT", self.resolver.path(uid, "following", follow_id))

    def unfollow_user(self, uid: SubjectLike, follow_id: str) -> "Response":
        return self._toggle("DELETE", self.resolver.path(uid, "following", follow_id))

    # Groups

    def list_groups(
        self, uid: SubjectLike = None, options: ListGroupOptions | None = None
    ) -> tuple[list[Group], "Response"]:
        """
        List all groups a user has joined.
        """
        return self._list(Group, self.resolver.path(uid, "groups"), options)

    def join_group(self, uid: SubjectLike, group_id: str) -> "Response":
        return self._toggle("PUT", self.resolver.path(uid, "groups", group_id))

    def leave_group(self, uid: SubjectLike, group_id: str) -> "Response":
        """
        Remove a user from a group.

        A 404 for a membership that doesn't exist is raised as HTTPStatusError;
        treating it as a no-op is up to the caller.
        """
        return self._toggle("DELETE", self.resolver.path(uid, "groups", group_id))
