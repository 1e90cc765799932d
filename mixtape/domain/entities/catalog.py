"""Catalog domain entities.

Users, songs and playlists as plain attrs values with zero external dependencies.
"""

from attrs import define, field, validators


@define(frozen=True, slots=True)
class User:
    """A catalog user who can own playlists."""

    id: str = field(validator=validators.instance_of(str))
    name: str = field(default="", validator=validators.instance_of(str))


@define(frozen=True, slots=True)
class Song:
    """A song available for inclusion in playlists."""

    id: str = field(validator=validators.instance_of(str))
    artist: str = field(default="", validator=validators.instance_of(str))
    title: str = field(default="", validator=validators.instance_of(str))


@define(slots=True)
class Playlist:
    """An ordered list of song ids owned by one user.

    Playlists are mutable because the change engine appends songs to the
    stored instance. Values arriving in change requests are copied before
    they are stored in a catalog.
    """

    id: str = field(default="", validator=validators.instance_of(str))
    user_id: str = field(default="", validator=validators.instance_of(str))
    song_ids: list[str] = field(
        factory=list,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(str),
            iterable_validator=validators.instance_of(list),
        ),
    )


@define(slots=True)
class Catalog:
    """Aggregate root holding users, songs and playlists in input order.

    Users and songs are read-only after load. Playlists change only through
    the change engine, which may reorder them when removing.
    """

    users: list[User] = field(factory=list)
    songs: list[Song] = field(factory=list)
    playlists: list[Playlist] = field(factory=list)
