# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.


class EdaboError(Exception):
    """Base class for all failures reported by the edabo commands."""


## -- TRACK IDENTITY --

class MissingTag(EdaboError):

    def __init__(self, source, tag):
        self.source = source
        self.tag = tag
        super().__init__(f"'{source}' has no {tag} tag")


class InvalidIdentifier(EdaboError):

    def __init__(self, source, tag, value=None):
        self.source = source
        self.tag = tag
        self.value = value
        super().__init__(f"'{source}' has an invalid {tag}: {value!r}")


## -- STORAGE --

class InvalidPlaylistName(EdaboError):

    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid playlist name: {name!r}")


class NotFound(EdaboError):

    def __init__(self, name, path=None):
        self.name = name
        self.path = path
        super().__init__(f"No playlist named '{name}'")


class CorruptData(EdaboError):

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read playlist '{path}': {reason}")


class WriteFailure(EdaboError):

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write playlist '{path}': {reason}")


class StorageDirectoryUnavailable(EdaboError):

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Playlist directory '{path}' is unavailable: {reason}")


## -- LIBRARY --

class LibraryUnavailable(EdaboError):

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"MPD is unavailable: {reason}")


class NoCurrentSong(EdaboError):

    def __init__(self):
        super().__init__("MPD is not playing anything")


class MissingInLibrary(EdaboError):

    def __init__(self, recording_id):
        self.recording_id = recording_id
        super().__init__(f"Recording {recording_id} is not in the library")


class PartialResolutionFailure(EdaboError):
    """
    One or more tracks of a playlist could not be found in the library.

    The tracks that were found have been queued regardless.
    """

    def __init__(self, failures):
        self.failures = list(failures)
        super().__init__(
            f"{len(self.failures)} track(s) are not in the library: "
            + ', '.join(str(rid) for rid in self.recording_ids))

    @property
    def recording_ids(self):
        return [f.recording_id for f in self.failures]
