# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

from optparse import OptionParser

from beets.library import Library
from beets.ui import Subcommand

from beetsplug.edabo import common
from beetsplug.edabo.connection import EdaboBase
from beetsplug.edabo.errors import EdaboError
from beetsplug.edabo.merge import add_tracks, current_track, identify_songs


class EdaboAddCommand(Subcommand, EdaboBase):

    def __init__(self, plugin):
        self.plugin = plugin

        self.parser = OptionParser(
            usage='beet edabo-add [options] PLAYLIST'
        )

        self.parser.add_option(
            '-a', '--all',
            action='store_true', dest='all', default=False,
            help=u'add every song in the MPD queue, not just the current one'
        )

        self.parser.add_option(
            '-d', '--description',
            action='store', dest='description', default=None,
            help=u'description for the playlist, if it has to be created'
        )

        self.parser.add_option(
            '-p', '--pretend',
            action='store_true', dest='pretend', default=False,
            help=u'report what would be added, but don\'t save the playlist'
        )

        super(EdaboAddCommand, self).__init__(
            parser=self.parser,
            name=common.plg_ns['__ADD_COMMAND__'],
            help=u'add the current song or the MPD queue to a playlist'
        )

    def func(self, lib: Library, opts, args):
        name = self._playlist_name(args)
        try:
            with self._library() as library:
                if opts.all:
                    tracks = identify_songs(library.current_queue(), log=self.plugin._log)
                else:
                    tracks = [current_track(library)]
            add_tracks(self._store(), name, tracks,
                       description=opts.description,
                       pretend=opts.pretend,
                       log=self.plugin._log)
        except EdaboError as e:
            self._fail(e)
