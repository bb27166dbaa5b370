# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

import json
import os
from pathlib import Path
from uuid import UUID

from beetsplug.edabo import common
from beetsplug.edabo.errors import (
    CorruptData, InvalidPlaylistName, NotFound, StorageDirectoryUnavailable, WriteFailure,
)
from beetsplug.edabo.helpers import format_timestamp, normpath, parse_timestamp
from beetsplug.edabo.model import Playlist, Track


EXTENSION = '.edabo'


def default_directory():
    """The XDG data directory for playlists, e.g. ~/.local/share/edabo/playlists."""
    data_home = os.environ.get('XDG_DATA_HOME') or Path.home() / '.local' / 'share'
    return normpath(Path(data_home) / 'edabo' / 'playlists')


## -- SERIALIZATION --

def to_dict(playlist):
    return {
        'name': playlist.name,
        'description': playlist.description,
        'timestamp': format_timestamp(playlist.timestamp),
        'uuid': str(playlist.uuid),
        'tracklist': [track.to_dict() for track in playlist],
    }


def from_dict(data):
    """
    Rebuild a playlist from its JSON object.

    :raises KeyError, ValueError, TypeError: if the object does not match
                                             the playlist schema.
    """
    if not isinstance(data, dict):
        raise TypeError(f'expected an object, got {type(data).__name__}')
    name = data['name']
    if not isinstance(name, str):
        raise TypeError('name must be a string')
    description = data.get('description')
    if description is not None and not isinstance(description, str):
        raise TypeError('description must be a string or null')
    return Playlist(
        name=name,
        description=description,
        tracklist=[Track.from_dict(t) for t in data['tracklist']],
        timestamp=parse_timestamp(data['timestamp']),
        uuid=UUID(data['uuid']),
    )


def dumps(playlist):
    return json.dumps(to_dict(playlist), indent=2)


def loads(text, source='<string>'):
    try:
        return from_dict(json.loads(text))
    except json.JSONDecodeError as e:
        raise CorruptData(source, f'invalid JSON: {e}')
    except KeyError as e:
        raise CorruptData(source, f'missing field {e}')
    except (ValueError, TypeError, AttributeError) as e:
        raise CorruptData(source, str(e))


class PlaylistStore:
    """Reads and writes playlists as <name>.edabo files in one directory."""

    def __init__(self, directory=None, log=None):
        """
        :param directory: Where playlists are kept; defaults to the XDG
                          data directory.
        :param log:       Logger to report to.
        """
        self.directory = normpath(directory) if directory else default_directory()
        self._log = common.logger(log)

    def _ensure_directory(self):
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageDirectoryUnavailable(self.directory, e.strerror or str(e))
        if not self.directory.is_dir():
            raise StorageDirectoryUnavailable(self.directory, 'not a directory')
        return self.directory

    def _path(self, name):
        if (not name or name in ('.', '..') or '/' in name
                or (os.altsep and os.altsep in name) or os.sep in name):
            raise InvalidPlaylistName(name)
        return self.directory / f'{name}{EXTENSION}'

    def path_for(self, name):
        """Where the playlist called name is stored; creates the directory."""
        path = self._path(name)
        self._ensure_directory()
        return path

    def exists(self, name):
        return self._path(name).is_file()

    def load(self, name):
        path = self._path(name)
        self._log.debug(f"Loading playlist '{name}' from '{path}'")
        try:
            with open(path, encoding='utf-8') as f:
                text = f.read()
        except FileNotFoundError:
            raise NotFound(name, path)
        except (OSError, UnicodeDecodeError) as e:
            raise CorruptData(path, str(e))
        return loads(text, source=path)

    def save(self, playlist, name=None):
        """
        Write a playlist to disk.

        :param playlist: The playlist to write.
        :param name:     File name to store it under; defaults to the
                         playlist's own name.
        """
        name = name if name is not None else playlist.name
        path = self.path_for(name)
        self._log.debug(f"Saving playlist '{name}' ({len(playlist)} tracks) to '{path}'")
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(dumps(playlist) + '\n')
        except OSError as e:
            raise WriteFailure(path, e.strerror or str(e))
        return path

    def list(self):
        """Paths of all stored playlists, in directory order."""
        directory = self._ensure_directory()
        return [p for p in directory.iterdir()
                if p.suffix == EXTENSION and p.is_file()]
