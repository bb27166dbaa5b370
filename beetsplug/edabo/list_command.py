# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

from optparse import OptionParser

from beets.library import Library
from beets.ui import Subcommand, print_
from beets.util import displayable_path

from beetsplug.edabo import common
from beetsplug.edabo.connection import EdaboBase
from beetsplug.edabo.errors import EdaboError


class EdaboListCommand(Subcommand, EdaboBase):

    def __init__(self, plugin):
        self.plugin = plugin

        self.parser = OptionParser(usage='beet edabo-list')

        super(EdaboListCommand, self).__init__(
            parser=self.parser,
            name=common.plg_ns['__LIST_COMMAND__'],
            help=u'list all stored playlists'
        )

    def func(self, lib: Library, opts, args):
        try:
            paths = self._store().list()
        except EdaboError as e:
            self._fail(e)
        for path in paths:
            print_(displayable_path(path))
