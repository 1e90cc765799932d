"""Mixtape - batch change application for a users/songs/playlists catalog."""
