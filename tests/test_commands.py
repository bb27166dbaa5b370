# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

import json
import shutil
import tempfile
from contextlib import nullcontext
from unittest import TestCase
from unittest.mock import patch
from uuid import UUID

from beets.ui import UserError

from beetsplug.edabo.add_command import EdaboAddCommand
from beetsplug.edabo.errors import LibraryUnavailable
from beetsplug.edabo.list_command import EdaboListCommand
from beetsplug.edabo.load_command import EdaboLoadCommand
from beetsplug.edabo.model import Playlist, Track
from beetsplug.edabo.print_command import EdaboPrintCommand
from beetsplug.edabo.store import PlaylistStore

from .helper import FakeLibrary, RECORDING_A, RECORDING_B, RECORDING_C, mock_plugin, song


class CommandTestCase(TestCase):
    """Runs commands against a temporary store and a fake MPD."""

    command_class = None

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.store = PlaylistStore(self.tmpdir)
        self.library = FakeLibrary()
        self.plugin = mock_plugin()
        self.command = self.command_class(self.plugin)

        patches = [
            patch.object(self.command_class, '_store', return_value=self.store),
            patch.object(self.command_class, '_library',
                         side_effect=lambda: nullcontext(self.library)),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def run_command(self, *argv):
        opts, args = self.command.parser.parse_args(list(argv))
        self.command.func(None, opts, args)


class TestListCommand(CommandTestCase):
    command_class = EdaboListCommand

    def test_name(self):
        self.assertEqual(self.command.name, 'edabo-list')

    @patch('beetsplug.edabo.list_command.print_')
    def test_lists_playlists(self, print_):
        self.store.save(Playlist('one'))
        self.store.save(Playlist('two'))
        self.run_command()
        printed = sorted(call.args[0] for call in print_.call_args_list)
        self.assertEqual(len(printed), 2)
        self.assertTrue(printed[0].endswith('one.edabo'))
        self.assertTrue(printed[1].endswith('two.edabo'))


class TestPrintCommand(CommandTestCase):
    command_class = EdaboPrintCommand

    @patch('beetsplug.edabo.print_command.print_')
    def test_prints_queue(self, print_):
        self.library.queue = [song(RECORDING_A), {'file': 'untagged.mp3'}, song(RECORDING_B)]
        self.run_command()
        data = json.loads(print_.call_args.args[0])
        self.assertEqual(data['name'], 'Current')
        self.assertEqual(data['description'], 'The current playlist')
        self.assertEqual([UUID(t['recordingid']) for t in data['tracklist']],
                         [RECORDING_A, RECORDING_B])

    def test_library_unavailable(self):
        with patch.object(EdaboPrintCommand, '_library',
                          side_effect=LibraryUnavailable('connection refused')):
            with self.assertRaises(UserError):
                self.run_command()
        self.plugin._log.error.assert_called_once()


class TestAddCommand(CommandTestCase):
    command_class = EdaboAddCommand

    def test_adds_current_song(self):
        self.library.current = song(RECORDING_C)
        self.library.queue = [song(RECORDING_A), song(RECORDING_C)]
        self.run_command('mine')
        self.assertEqual(self.store.load('mine').tracklist, {Track(RECORDING_C)})

    def test_adds_whole_queue(self):
        existing = Playlist('mine')
        self.store.save(existing)
        self.library.queue = [song(RECORDING_A), song(RECORDING_B)]

        self.run_command('--all', 'mine')

        stored = self.store.load('mine')
        self.assertEqual(stored.tracklist, {Track(RECORDING_A), Track(RECORDING_B)})
        self.assertEqual(stored.uuid, existing.uuid)

    def test_description_for_new_playlist(self):
        self.library.current = song(RECORDING_A)
        self.run_command('-d', 'road trip', 'mine')
        self.assertEqual(self.store.load('mine').description, 'road trip')

    def test_pretend(self):
        self.library.current = song(RECORDING_A)
        self.run_command('--pretend', 'mine')
        self.assertFalse(self.store.exists('mine'))

    def test_nothing_playing(self):
        with self.assertRaises(UserError):
            self.run_command('mine')
        self.assertFalse(self.store.exists('mine'))

    def test_needs_one_playlist(self):
        with self.assertRaises(UserError):
            self.run_command()
        with self.assertRaises(UserError):
            self.run_command('one', 'two')


class TestLoadCommand(CommandTestCase):
    command_class = EdaboLoadCommand

    def test_loads_playlist(self):
        self.store.save(Playlist('mine', tracklist=[Track(RECORDING_A), Track(RECORDING_B)]))
        self.library.songs = [song(RECORDING_A), song(RECORDING_B)]
        self.library.queue = [song(RECORDING_C)]

        self.run_command('mine')

        self.assertEqual(self.library.queued_recordings(), [RECORDING_C, RECORDING_A, RECORDING_B])

    def test_clear(self):
        self.store.save(Playlist('mine', tracklist=[Track(RECORDING_A)]))
        self.library.songs = [song(RECORDING_A)]
        self.library.queue = [song(RECORDING_C)]

        self.run_command('--clear', 'mine')

        self.assertEqual(self.library.queued_recordings(), [RECORDING_A])

    def test_reports_missing_tracks(self):
        self.store.save(Playlist('mine', tracklist=[
            Track(RECORDING_A), Track(RECORDING_B), Track(RECORDING_C)]))
        self.library.songs = [song(RECORDING_A), song(RECORDING_C)]

        with self.assertRaises(UserError) as cm:
            self.run_command('mine')

        self.assertIn(str(RECORDING_B), str(cm.exception))
        self.assertEqual(self.library.queued_recordings(), [RECORDING_A, RECORDING_C])

    def test_missing_playlist(self):
        with self.assertRaises(UserError) as cm:
            self.run_command('nothing')
        self.assertIn('nothing', str(cm.exception))
