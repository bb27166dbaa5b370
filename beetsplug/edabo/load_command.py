# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

from optparse import OptionParser

from beets.library import Library
from beets.ui import Subcommand

from beetsplug.edabo import common
from beetsplug.edabo.connection import EdaboBase
from beetsplug.edabo.errors import EdaboError
from beetsplug.edabo.reconcile import load_playlist


class EdaboLoadCommand(Subcommand, EdaboBase):

    def __init__(self, plugin):
        self.plugin = plugin

        self.parser = OptionParser(
            usage='beet edabo-load [options] PLAYLIST'
        )

        self.parser.add_option(
            '-c', '--clear',
            action='store_true', dest='clear', default=False,
            help=u'clear the MPD queue before loading'
        )

        self.parser.add_option(
            '-p', '--pretend',
            action='store_true', dest='pretend', default=False,
            help=u'report which songs would be queued, but don\'t queue them'
        )

        super(EdaboLoadCommand, self).__init__(
            parser=self.parser,
            name=common.plg_ns['__LOAD_COMMAND__'],
            help=u'queue a playlist in MPD'
        )

    def func(self, lib: Library, opts, args):
        name = self._playlist_name(args)
        store = self._store()
        try:
            with self._library() as library:
                load_playlist(store, library, name,
                              clear=opts.clear,
                              pretend=opts.pretend,
                              log=self.plugin._log)
        except EdaboError as e:
            self._fail(e)
