# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from beetsplug.edabo import common
from beetsplug.edabo.errors import InvalidIdentifier, MissingTag
from beetsplug.edabo.helpers import lower_keys

log = common.logger()

# MPD tag names, as reported (lower-cased) by python-mpd2.
RECORDING_TAG = 'musicbrainz_trackid'
RELEASE_TAG = 'musicbrainz_albumid'
RELEASE_TRACK_TAG = 'musicbrainz_releasetrackid'


def _optional_uuid(value):
    return None if value is None else UUID(str(value))


@dataclass(frozen=True)
class Track:
    """
    Content address of a track.

    All three identifiers take part in equality and hashing, so a track
    known only by its recording differs from the same recording on a
    specific release.
    """

    recording_id: UUID
    release_id: Optional[UUID] = None
    release_track_id: Optional[UUID] = None

    @classmethod
    def from_tags(cls, tags):
        """
        Build a track from the tags of an MPD song.

        :param tags: Tag dictionary as returned by python-mpd2.
        :raises MissingTag: if the song has no recording ID.
        :raises InvalidIdentifier: if the recording ID is not a UUID.
        """
        tags = lower_keys(tags)
        source = tags.get('file') or '<unknown>'

        value = tags.get(RECORDING_TAG)
        if value is None:
            raise MissingTag(source, 'recordingid')
        try:
            recording_id = UUID(value)
        except (ValueError, TypeError):
            raise InvalidIdentifier(source, 'recordingid', value)

        return cls(recording_id=recording_id,
                   release_id=cls._optional_tag(tags, RELEASE_TAG, source),
                   release_track_id=cls._optional_tag(tags, RELEASE_TRACK_TAG, source))

    @staticmethod
    def _optional_tag(tags, tag, source):
        # An unparsable optional ID counts as absent.
        value = tags.get(tag)
        if value is None:
            return None
        try:
            return UUID(value)
        except (ValueError, TypeError):
            log.debug(f"Ignoring invalid {tag} {value!r} of '{source}'")
            return None

    @classmethod
    def from_dict(cls, data):
        return cls(recording_id=UUID(data['recordingid']),
                   release_id=_optional_uuid(data.get('releaseid')),
                   release_track_id=_optional_uuid(data.get('releasetrackid')))

    def to_dict(self):
        return {
            'recordingid': str(self.recording_id),
            'releaseid': None if self.release_id is None else str(self.release_id),
            'releasetrackid': None if self.release_track_id is None else str(self.release_track_id),
        }

    def __str__(self):
        return str(self.recording_id)


class Playlist:
    """
    Named, UUID-identified and timestamped set of tracks.

    The tracklist keeps insertion order so that a stored playlist is
    processed in the order it was written, but compares as a set.
    """

    def __init__(self, name, description=None, tracklist=(), timestamp=None, uuid=None):
        self.name = name
        self.description = description
        self.timestamp = timestamp if timestamp is not None else datetime.now(timezone.utc)
        self.uuid = uuid if uuid is not None else uuid4()
        self._tracks = dict.fromkeys(tracklist)

    @property
    def tracklist(self):
        return frozenset(self._tracks)

    def add(self, track):
        """Add a track, returning False if an identical one is present."""
        if track in self._tracks:
            return False
        self._tracks[track] = None
        return True

    def __iter__(self):
        return iter(list(self._tracks))

    def __len__(self):
        return len(self._tracks)

    def __contains__(self, track):
        return track in self._tracks

    def __eq__(self, other):
        if not isinstance(other, Playlist):
            return NotImplemented
        # Timestamps are not compared.
        return (self.name == other.name
                and self.description == other.description
                and self.tracklist == other.tracklist
                and self.uuid == other.uuid)

    __hash__ = None

    def __repr__(self):
        return (f'Playlist(name={self.name!r}, uuid={self.uuid}, '
                f'tracks={len(self)}, timestamp={self.timestamp.isoformat()})')
