# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

from beetsplug.edabo import common
from beetsplug.edabo.errors import MissingInLibrary
from beetsplug.edabo.model import RECORDING_TAG


class LibraryResolver:
    """Finds the song in MPD's database that a track identity refers to."""

    def __init__(self, library, log=None):
        """
        :param library: A connected LibraryClient.
        :param log:     Logger to report to.
        """
        self.library = library
        self._log = common.logger(log)

    def resolve(self, track):
        """
        Return the first song recorded as track.recording_id.

        :raises MissingInLibrary: if MPD knows no such recording.
        :raises LibraryUnavailable: if MPD cannot be queried.
        """
        songs = self.library.search_by_tag(RECORDING_TAG, track.recording_id, limit=1)
        if not songs:
            raise MissingInLibrary(track.recording_id)
        song = songs[0]
        self._log.debug(f"Resolved {track} to '{song.get('file')}'")
        return song

    def resolve_and_enqueue(self, track):
        song = self.resolve(track)
        self.library.enqueue(song)
        return song
