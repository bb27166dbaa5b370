# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

import os

from beets.plugins import BeetsPlugin
from confuse import ConfigSource, load_yaml

from beetsplug.edabo.add_command import EdaboAddCommand
from beetsplug.edabo.list_command import EdaboListCommand
from beetsplug.edabo.load_command import EdaboLoadCommand
from beetsplug.edabo.print_command import EdaboPrintCommand


class EdaboPlugin(BeetsPlugin):
    _default_plugin_config_file_name_ = 'config_default.yml'

    def __init__(self):
        super(EdaboPlugin, self).__init__()
        config_file_path = os.path.join(os.path.dirname(__file__), self._default_plugin_config_file_name_)
        source = ConfigSource(load_yaml(config_file_path) or {}, config_file_path)
        self.config.add(source)
        self.config.add({
            'host': os.environ.get('MPD_HOST', 'localhost'),
            'port': int(os.environ.get('MPD_PORT', 6600)),
        })

    def commands(self):
        return [
            EdaboListCommand(self),
            EdaboPrintCommand(self),
            EdaboAddCommand(self),
            EdaboLoadCommand(self),
        ]
