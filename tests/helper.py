# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

import logging
from unittest.mock import MagicMock
from uuid import UUID

from beetsplug.edabo.model import Track

RECORDING_A = UUID('fefd550f-b68e-4c11-b4d6-dfb4836a820e')
RECORDING_B = UUID('1bc2a6a8-1d14-4d36-8d9e-4fa2e1ff4e1b')
RECORDING_C = UUID('6b4d3a09-3c7a-4c1e-8a36-1a2f0c0f8b3e')
RELEASE = UUID('b6f23b8f-1b0f-4167-92e8-d276164e1019')
RELEASE_TRACK = UUID('d71b7b2d-075c-3c09-8a3f-d050b121f3ab')


def song(recording_id, release_id=None, release_track_id=None, file=None):
    """An MPD song dictionary, as python-mpd2 reports it."""
    tags = {'file': file or f'music/{recording_id}.flac'}
    if recording_id is not None:
        tags['musicbrainz_trackid'] = str(recording_id)
    if release_id is not None:
        tags['musicbrainz_albumid'] = str(release_id)
    if release_track_id is not None:
        tags['musicbrainz_releasetrackid'] = str(release_track_id)
    return tags


def full_track(recording_id=RECORDING_A):
    return Track(recording_id, RELEASE, RELEASE_TRACK)


def mock_plugin():
    plugin = MagicMock()
    plugin._log = MagicMock()
    plugin._log.level = logging.INFO
    return plugin


class FakeLibrary:
    """Stands in for a connected LibraryClient."""

    def __init__(self, songs=(), queue=(), current=None):
        self.songs = list(songs)
        self.queue = list(queue)
        self.current = current
        self.searches = []
        self.cleared = 0

    def current_queue(self):
        return list(self.queue)

    def current_song(self):
        return self.current

    def search_by_tag(self, tag, value, limit=1):
        self.searches.append((tag, str(value)))
        return [s for s in self.songs if s.get(tag) == str(value)][:limit]

    def enqueue(self, song):
        self.queue.append(song)

    def clear_queue(self):
        self.cleared += 1
        self.queue = []

    def queued_recordings(self):
        return [UUID(s['musicbrainz_trackid']) for s in self.queue]
