# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

__author__ = u'Wieland Hoffmann'
__copyright__ = u'Public domain'
__license__ = u'License :: OSI Approved :: Unlicense'

__version__ = u'0.3.0'
__status__ = u'Functional'

__PACKAGE_TITLE__ = u'Edabo'
__PACKAGE_NAME__ = u'beets-edabo'
__PACKAGE_DESCRIPTION__ = u'MusicBrainz identifier playlists for MPD, as a Beets plugin'
__PACKAGE_URL__ = u'https://github.com/mineo/edabo'

__PLUGIN_NAME__ = u'edabo'

__LIST_COMMAND__ = u'edabo-list'
__PRINT_COMMAND__ = u'edabo-print'
__ADD_COMMAND__ = u'edabo-add'
__LOAD_COMMAND__ = u'edabo-load'
