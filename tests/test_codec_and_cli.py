import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from panelgrid import GridConfig, Grid, area_to_json, grid_from_json, grid_to_json, state_to_json
from panelgrid_core.cli import layout_pretty, main
from panelgrid_core.config import debug_enabled


class TestCodec(unittest.TestCase):
    def test_given_grid_when_roundtrip_json_then_equal(self):
        g = Grid(rows=2, columns=2)
        g.update_at(1, 1, {'dx': 2, 'data': {'title': 'wide'}})
        gj = grid_to_json(g)
        self.assertEqual(gj['rows'], 2)
        self.assertEqual(gj['columns'], 2)
        self.assertEqual(len(gj['panels']), 4)
        # survives a trip through the json module
        back = grid_from_json(json.loads(json.dumps(gj)))
        self.assertEqual(list(back), list(g))

    def test_given_string_coordinates_when_loading_then_coerced_to_int(self):
        obj = {'rows': 1, 'columns': 2, 'panels': [{'x': '1', 'y': '1'}, {'x': '2', 'y': '1'}]}
        g = grid_from_json(obj)
        self.assertEqual(g.get_data(2, 1), {'x': 2, 'y': 1})

    def test_given_area_when_to_json_then_values_and_cells(self):
        a = Grid(rows=2, columns=2).area(1, 1, 2, 1)
        self.assertEqual(area_to_json(a), {'rows': 2, 'columns': 2, 'values': [1, 1, 0, 0], 'cells': [[1, 1], [2, 1]]})

    def test_given_layout_state_when_to_json_then_plain_data(self):
        sj = state_to_json({'active': {'x': 1, 'y': 1, 'operation': 'resize'}, 'panels': [{'x': 1, 'y': 1}]})
        self.assertEqual(sj, {
            'active': {'x': 1, 'y': 1, 'operation': 'resize'},
            'panels': [{'x': 1, 'y': 1, 'dx': 1, 'dy': 1}],
        })
        self.assertEqual(state_to_json({'active': None}), {'active': None, 'panels': []})


class TestConfig(unittest.TestCase):
    def test_given_env_when_from_env_then_dimensions_read(self):
        with patch.dict(os.environ, {'PANELGRID_ROWS': '3', 'PANELGRID_COLUMNS': '3'}):
            cfg = GridConfig.from_env()
        self.assertEqual((cfg.rows, cfg.columns, tuple(cfg.panels_data)), (3, 3, ()))

    def test_given_missing_env_when_from_env_then_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            cfg = GridConfig.from_env()
            self.assertFalse(debug_enabled())
        self.assertEqual((cfg.rows, cfg.columns), (4, 4))

    def test_given_bad_env_when_from_env_then_value_error(self):
        with patch.dict(os.environ, {'PANELGRID_ROWS': 'four'}):
            with self.assertRaises(ValueError):
                GridConfig.from_env()

    def test_given_debug_flag_when_checked_then_enabled(self):
        with patch.dict(os.environ, {'PANELGRID_DEBUG': 'yes'}):
            self.assertTrue(debug_enabled())


class TestCli(unittest.TestCase):
    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_given_resized_panel_when_pretty_then_owner_letters(self):
        g = Grid(rows=2, columns=2)
        g.update_at(1, 1, {'dx': 2})
        self.assertEqual(layout_pretty(g), "A A\nC D")

    def test_given_resize_args_when_running_cli_then_json_layout(self):
        code, out, _ = self._run(['--rows', '2', '--columns', '2', '--resize', '1', '1', '2', '2', '--json'])
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertIsNone(data['active'])
        self.assertEqual(data['panels'][0]['dx'], 2)
        self.assertEqual(data['panels'][0]['dy'], 2)

    def test_given_overlapping_resize_when_running_cli_then_rejected_message(self):
        code, out, err = self._run([
            '--rows', '2', '--columns', '2',
            '--resize', '1', '2', '2', '2',
            '--resize', '2', '1', '2', '2',
        ])
        self.assertEqual(code, 0)
        self.assertIn('rejected', err)
        self.assertEqual(out.strip(), "A B\nC C")

    def test_given_panels_file_when_running_cli_then_loaded(self):
        panels = [{'x': 1, 'y': 1, 'dx': 2, 'dy': 1}, {'x': 2, 'y': 1}, {'x': 1, 'y': 2}, {'x': 2, 'y': 2}]
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, 'panels.json')
            with open(path, 'w', encoding='utf-8') as fh:
                json.dump({'panels': panels}, fh)
            code, out, _ = self._run(['--rows', '2', '--columns', '2', '--panels', path])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "A A\nC D")

    def test_given_panel_records_without_position_when_running_cli_then_error_exit(self):
        panels = [{'title': 'a'}, {'title': 'b'}, {'title': 'c'}, {'title': 'd'}]
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, 'panels.json')
            with open(path, 'w', encoding='utf-8') as fh:
                json.dump(panels, fh)
            code, out, err = self._run(['--rows', '2', '--columns', '2', '--panels', path])
        self.assertEqual(code, 1)
        self.assertEqual(out, '')
        self.assertIn('needs integer x and y', err)

    def test_given_missing_panels_file_when_running_cli_then_error_exit(self):
        code, _, err = self._run(['--panels', os.path.join(tempfile.gettempdir(), 'no-such-panels.json')])
        self.assertEqual(code, 1)
        self.assertIn('error', err)


if __name__ == '__main__':
    unittest.main(verbosity=2)
