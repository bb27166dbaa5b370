# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

from beetsplug.edabo import common
from beetsplug.edabo.errors import EdaboError, NoCurrentSong, NotFound
from beetsplug.edabo.model import Playlist, Track


def identify_songs(songs, log=None):
    """
    Track identities of MPD songs, in queue order.

    Songs without a usable recording ID are skipped with a warning.
    """
    log = common.logger(log)
    tracks = []
    for song in songs:
        try:
            tracks.append(Track.from_tags(song))
        except EdaboError as e:
            log.warning(f'Skipping song: {e}')
    return tracks


def current_track(library):
    """
    Track identity of the song MPD is playing.

    :raises NoCurrentSong: if MPD is not playing anything.
    """
    song = library.current_song()
    if song is None:
        raise NoCurrentSong()
    return Track.from_tags(song)


def merge_tracks(playlist, tracks):
    """
    Add tracks to a playlist, keyed by their full identity.

    A track sharing only its recording ID with one already present is added
    as a separate entry.

    :return: The tracks that were not in the playlist before.
    """
    return [track for track in tracks if playlist.add(track)]


def add_tracks(store, name, tracks, description=None, pretend=False, log=None):
    """
    Merge tracks into the stored playlist called name.

    A missing playlist is created first, with the given description. An
    existing playlist keeps its UUID, timestamp and description, and is
    written back to the file it was read from.

    :return: (playlist, added) where added lists the new tracks.
    """
    log = common.logger(log)
    try:
        playlist = store.load(name)
    except NotFound:
        log.info(f"Creating new playlist '{name}'")
        playlist = Playlist(name, description=description)

    added = merge_tracks(playlist, tracks)
    if pretend:
        log.info(f"Would add {len(added)} track(s) to playlist '{name}'")
        return playlist, added

    store.save(playlist, name=name)
    log.info(f"Added {len(added)} track(s) to playlist '{name}' ({len(playlist)} total)")
    return playlist, added
