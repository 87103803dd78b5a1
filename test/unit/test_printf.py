from io import BytesIO, StringIO, TextIOWrapper
from unittest import mock

from . import *

from strformat import printf
from strformat.app_version import version
from strformat.exceptions import InsufficientArgumentsError


class TestFormatEach(TestCase):
    def test_single_pass(self):
        self.assertEqual(list(printf.format_each('%s-%s\n', ['a', 'b'])),
                         ['a-b\n'])
        self.assertEqual(list(printf.format_each('hello\n', [])),
                         ['hello\n'])

    def test_reuse(self):
        self.assertEqual(list(printf.format_each('%s\n', ['a', 'b', 'c'])),
                         ['a\n', 'b\n', 'c\n'])
        self.assertEqual(list(printf.format_each('%d:%x ', ['1', '10', '2',
                                                            '11'])),
                         ['1:a ', '2:b '])

    def test_once(self):
        with self.assertLogs('strformat.printf', 'WARNING') as cm:
            self.assertEqual(list(printf.format_each('%s\n', ['a', 'b'],
                                                     once=True)),
                             ['a\n'])
        self.assertEqual(cm.output, [
            "WARNING:strformat.printf:ignoring 1 unused argument(s): 'b'",
        ])

    def test_nothing_consumed(self):
        with self.assertLogs('strformat.printf', 'WARNING') as cm:
            self.assertEqual(list(printf.format_each('hi\n', ['a', 'b'])),
                             ['hi\n'])
        self.assertEqual(cm.output, [
            'WARNING:strformat.printf:ignoring 2 unused argument(s): ' +
            "'a', 'b'",
        ])

    def test_missing_arguments(self):
        each = printf.format_each('%s %s\n', ['a', 'b', 'c'])
        self.assertEqual(next(each), 'a b\n')
        self.assertRaises(InsufficientArgumentsError, next, each)


class TestMain(TestCase):
    def main(self, *args):
        out = StringIO()
        with mock.patch('sys.argv', ['strformat-printf'] + list(args)), \
             mock.patch('sys.stdout', out), \
             mock.patch('strformat.log.init') as init:  # noqa
            result = printf.main()
        return result, out.getvalue(), init

    def test_format(self):
        result, out, init = self.main('%s=%05.1f\\n', 'pi', '3.14159')
        self.assertEqual(result, 0)
        self.assertEqual(out, 'pi=003.1\n')
        init.assert_called_once_with('auto', debug=False)

    def test_reuse(self):
        result, out, _ = self.main('[%s]', 'a', 'b')
        self.assertEqual(result, 0)
        self.assertEqual(out, '[a][b]')

    def test_once(self):
        with self.assertLogs('strformat.printf', 'WARNING'):
            result, out, _ = self.main('--once', '[%s]', 'a', 'b')
        self.assertEqual(result, 0)
        self.assertEqual(out, '[a]')

    def test_raw_bytes(self):
        out = TextIOWrapper(BytesIO(), encoding='utf-8')
        with mock.patch('sys.argv', ['strformat-printf', '%c%s', '233',
                                     'a\udcff']), \
             mock.patch('sys.stdout', out), \
             mock.patch('strformat.log.init'):  # noqa
            self.assertEqual(printf.main(), 0)
        self.assertEqual(out.buffer.getvalue(), b'\xe9a\xff')

    def test_options(self):
        _, _, init = self.main('--color=never', '--debug', 'foo')
        init.assert_called_once_with('never', debug=True)

    def test_format_error(self):
        with self.assertLogs('strformat.printf', 'ERROR') as cm:
            result, out, _ = self.main('%d', 'foo')
        self.assertEqual(result, 1)
        self.assertEqual(out, '')
        self.assertEqual(cm.output, [
            "ERROR:strformat.printf:bad argument #1 to '%d' (number " +
            'expected, got string)',
        ])

    def test_partial_output(self):
        with self.assertLogs('strformat.printf', 'ERROR'):
            result, out, _ = self.main('%s %s\\n', 'a', 'b', 'c')
        self.assertEqual(result, 1)
        self.assertEqual(out, 'a b\n')

    def test_invalid_escape(self):
        with mock.patch('sys.stderr', StringIO()) as err, \
             self.assertRaises(SystemExit) as cm:  # noqa
            self.main('\\x4')
        self.assertEqual(cm.exception.code, 2)
        self.assertIn('invalid escape sequence', err.getvalue())

    def test_version(self):
        out = StringIO()
        with mock.patch('sys.argv', ['strformat-printf', '--version']), \
             mock.patch('sys.stdout', out), \
             self.assertRaises(SystemExit) as cm:  # noqa
            printf.main()
        self.assertEqual(cm.exception.code, 0)
        self.assertEqual(out.getvalue(),
                         'strformat-printf {}\n'.format(version))
