# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

from beetsplug.edabo import common
from beetsplug.edabo.errors import MissingInLibrary, PartialResolutionFailure
from beetsplug.edabo.resolver import LibraryResolver


def load_playlist(store, library, name, clear=False, pretend=False, log=None):
    """
    Queue every track of a stored playlist in MPD.

    Tracks missing from the library don't stop the others from being
    queued; they are reported together once all tracks were tried.

    :param store:   PlaylistStore holding the playlist.
    :param library: A connected LibraryClient.
    :param name:    Name of the playlist to load.
    :param clear:   If True, empty the MPD queue first.
    :param pretend: If True, only look the tracks up; the queue is untouched.
    :param log:     Logger to report to.
    :return: The tracks that were (or would be) queued, in playlist order.
    :raises PartialResolutionFailure: if some tracks are not in the library.
    """
    log = common.logger(log)
    playlist = store.load(name)
    resolver = LibraryResolver(library, log=log)

    if clear:
        if pretend:
            log.info('Would clear the MPD queue')
        else:
            library.clear_queue()

    queued = []
    failures = []
    for track in playlist:
        try:
            if pretend:
                resolver.resolve(track)
            else:
                resolver.resolve_and_enqueue(track)
        except MissingInLibrary as e:
            log.warning(str(e))
            failures.append(e)
            continue
        queued.append(track)

    verb = 'Would queue' if pretend else 'Queued'
    log.info(f"{verb} {len(queued)} of {len(playlist)} track(s) from playlist '{name}'")

    if failures:
        raise PartialResolutionFailure(failures)
    return queued
