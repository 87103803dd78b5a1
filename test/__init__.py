import unittest

from strformat import driver

__all__ = ['TestCase']


class TestCase(unittest.TestCase):
    def assertFormat(self, template, args, text, unused=None, msg=None):
        result = driver.format(template, *args)
        self.assertEqual(result.text, text, msg)
        self.assertEqual(result.unused, unused, msg)
        self.assertEqual(result.unused_count,
                         len(unused) if unused is not None else None, msg)

    def assertFormatRegex(self, template, args, regex, msg=None):
        result = driver.format(template, *args)
        self.assertRegex(result.text, regex, msg)
        return result
