# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

import logging
from contextlib import contextmanager
from functools import wraps

from beets.ui import UserError
from mpd import MPDClient, MPDError

from beetsplug.edabo import common
from beetsplug.edabo.errors import EdaboError, LibraryUnavailable
from beetsplug.edabo.store import PlaylistStore


def _library_call(method):
    """Report failures of the wrapped MPD call as LibraryUnavailable."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (MPDError, OSError) as e:
            raise LibraryUnavailable(str(e) or type(e).__name__)
    return wrapper


class LibraryClient:
    """
    The MPD operations edabo relies on.

    Wraps a connected python-mpd2 client; every failure to talk to MPD is
    raised as LibraryUnavailable and never retried.
    """

    def __init__(self, client, log=None):
        self.client = client
        self._log = common.logger(log)

    @_library_call
    def current_queue(self):
        return self.client.playlistinfo()

    @_library_call
    def current_song(self):
        song = self.client.currentsong()
        return song if song else None

    @_library_call
    def search_by_tag(self, tag, value, limit=1):
        """Songs whose tag equals value exactly, at most limit of them."""
        return self.client.find(tag, str(value), 'window', f'0:{limit}')

    @_library_call
    def enqueue(self, song):
        self._log.debug(f"Queueing '{song['file']}'")
        self.client.add(song['file'])

    @_library_call
    def clear_queue(self):
        self._log.debug('Clearing the MPD queue')
        self.client.clear()


@contextmanager
def library_connection(host, port=6600, password=None, timeout=10, log=None):
    """
    Connect to MPD for the duration of a with block.

    :param host:     Host name, or the path of MPD's unix socket.
    :param port:     TCP port; ignored for unix sockets.
    :param password: Sent to MPD when given.
    :param timeout:  Network timeout in seconds.
    :param log:      Logger to report to.
    """
    log = common.logger(log)
    client = MPDClient()
    client.timeout = timeout
    log.debug(f'Connecting to MPD at {host}:{port}')
    try:
        client.connect(host, port)
        if password:
            client.password(password)
    except (MPDError, OSError) as e:
        raise LibraryUnavailable(f'cannot connect to {host}:{port}: {e}')
    try:
        yield LibraryClient(client, log=log)
    finally:
        try:
            client.close()
        except (MPDError, OSError) as e:
            log.debug(f'Error while closing the MPD connection: {e}')
        finally:
            try:
                client.disconnect()
            except (MPDError, OSError) as e:
                log.debug(f'Error while disconnecting from MPD: {e}')


class EdaboBase:
    """Shared connection, storage and logging base for edabo commands."""

    plugin = None

    def _library(self):
        cfg = self.plugin.config
        return library_connection(
            host=cfg['host'].as_str(),
            port=cfg['port'].get(int),
            password=cfg['password'].as_str() or None,
            timeout=cfg['timeout'].as_number(),
            log=self.plugin._log,
        )

    def _store(self):
        directory = self.plugin.config['playlist_dir'].as_str()
        return PlaylistStore(directory or None, log=self.plugin._log)

    def _playlist_name(self, args):
        if len(args) != 1:
            raise UserError(f'expected exactly one playlist name, got {len(args)}')
        return args[0]

    def _fail(self, e: EdaboError):
        self.plugin._log.error(str(e))
        self._stack_trace(e)
        raise UserError(str(e))

    def _verbose(self):
        return self.plugin._log.level <= logging.DEBUG

    def _stack_trace(self, e):
        if self._verbose():
            self.plugin._log.exception(e)
