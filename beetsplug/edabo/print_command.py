# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

from optparse import OptionParser

from beets.library import Library
from beets.ui import Subcommand, print_

from beetsplug.edabo import common
from beetsplug.edabo.connection import EdaboBase
from beetsplug.edabo.errors import EdaboError
from beetsplug.edabo.merge import identify_songs
from beetsplug.edabo.model import Playlist
from beetsplug.edabo.store import dumps


class EdaboPrintCommand(Subcommand, EdaboBase):

    def __init__(self, plugin):
        self.plugin = plugin

        self.parser = OptionParser(usage='beet edabo-print')

        super(EdaboPrintCommand, self).__init__(
            parser=self.parser,
            name=common.plg_ns['__PRINT_COMMAND__'],
            help=u'print the MPD queue as a playlist'
        )

    def func(self, lib: Library, opts, args):
        try:
            with self._library() as library:
                songs = library.current_queue()
        except EdaboError as e:
            self._fail(e)

        tracks = identify_songs(songs, log=self.plugin._log)
        playlist = Playlist('Current', description='The current playlist', tracklist=tracks)
        print_(dumps(playlist))
