import os
from io import StringIO
from tempfile import TemporaryDirectory
from unittest import TestCase
from unittest.mock import patch

from rpncalc.__main__ import main
from rpncalc.version import VERSION_STRING


class TestCommandLine(TestCase):
    def run_main(self, *args, stdin: str = ''):
        stdout = StringIO()
        with patch('sys.stdout', stdout), patch('sys.stderr', StringIO()), patch('sys.stdin', StringIO(stdin)):
            retval = main(['rpncalc', '--no-color', '--no-status'] + list(args))
        return retval, stdout.getvalue()

    def test_evaluate(self):
        self.assertEqual((0, '7.0\n'), self.run_main('1', '+', '2', '*', '3'))
        self.assertEqual((0, '9.0\n'), self.run_main('( 1 + 2 ) * 3'))

    def test_rpn(self):
        self.assertEqual((0, '1.0 2.0 3.0 * +\n'), self.run_main('--rpn', '1 + 2 * 3'))

    def test_postfix(self):
        self.assertEqual((0, '9.0\n'), self.run_main('--postfix', '1 2 + 3 *'))

    def test_show_expression(self):
        self.assertEqual((0, '2 ^ 3 = 8.0\n'), self.run_main('-s', '2 ^ 3'))

    def test_special_values(self):
        self.assertEqual((0, 'inf\n'), self.run_main('1 / 0'))
        self.assertEqual((0, 'nan\n'), self.run_main('0 / 0'))

    def test_malformed(self):
        self.assertEqual((1, ''), self.run_main('( 1 + 2'))
        self.assertEqual((1, ''), self.run_main('1 2'))

    def test_stdin(self):
        self.assertEqual((0, '3.0\n12.0\n'), self.run_main(stdin='1 + 2\n\n# skipped\n3 * 4\n'))
        self.assertEqual((0, '3.0\n'), self.run_main('--file', '-', stdin='1 + 2\n'))

    def test_file(self):
        with TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'exprs.txt')
            with open(path, 'w') as f:
                f.write('1 + 2\n( 1 + 2\n2 ^ 3 ^ 2\n')
            self.assertEqual((1, '3.0\n64.0\n'), self.run_main('--file', path))
            yaml_path = os.path.join(tmpdir, 'exprs.data')
            with open(yaml_path, 'w') as f:
                f.write('- 8 - 4 - 2\n')
            self.assertEqual((0, '2.0\n'), self.run_main('--yaml', '--file', yaml_path))
            self.assertEqual((1, ''), self.run_main('--file', os.path.join(tmpdir, 'missing.txt')))
            self.assertEqual((1, ''), self.run_main('--file', path, '1 + 1'))

    def test_version(self):
        self.assertEqual((0, f"{' '.join(VERSION_STRING.split('.'))}\n"), self.run_main('-dumpversion'))
        self.assertEqual((0, ''), self.run_main('--version'))
