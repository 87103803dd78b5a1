from . import *

from strformat import utf8


class TestCharLength(TestCase):
    def test_ascii(self):
        for i in range(0x80):
            self.assertEqual(utf8.char_length(bytes([i])), 1, hex(i))

    def test_invalid_lead(self):
        for i in list(range(0x80, 0xC2)) + list(range(0xF5, 0x100)):
            self.assertEqual(utf8.char_length(bytes([i, 0x80, 0x80, 0x80])),
                             -1, hex(i))

    def test_two_bytes(self):
        self.assertEqual(utf8.char_length(b'\xC2\xA9'), 2)
        self.assertEqual(utf8.char_length(b'\xDF\xBF'), 2)
        self.assertEqual(utf8.char_length(b'\xC2\x40'), -1)
        self.assertEqual(utf8.char_length(b'\xC2\xC0'), -2)
        self.assertEqual(utf8.char_length(b'\xC2'), -1)

    def test_three_bytes(self):
        self.assertEqual(utf8.char_length(b'\xE0\xA0\x80'), 3)
        self.assertEqual(utf8.char_length(b'\xE1\xB4\x81'), 3)
        self.assertEqual(utf8.char_length(b'\xED\x80\x80'), 3)
        self.assertEqual(utf8.char_length(b'\xEF\xA4\x80'), 3)

        self.assertEqual(utf8.char_length(b'\xE0\x40\x40'), -1)
        self.assertEqual(utf8.char_length(b'\xE0\xA0\x40'), -2)
        self.assertEqual(utf8.char_length(b'\xE0\xA0\xC0'), -3)
        self.assertEqual(utf8.char_length(b'\xE1\xB4'), -2)

    def test_three_bytes_second_range(self):
        # Overlong encodings.
        self.assertEqual(utf8.char_length(b'\xE0\x80\x80'), -3)
        self.assertEqual(utf8.char_length(b'\xE0\x9F\xBF'), -3)
        # UTF-16 surrogates.
        self.assertEqual(utf8.char_length(b'\xED\xA0\x80'), -3)
        self.assertEqual(utf8.char_length(b'\xED\xBF\xBF'), -3)
        self.assertEqual(utf8.char_length(b'\xED\x9F\xBF'), 3)
        self.assertEqual(utf8.char_length(b'\xEE\x80\x80'), 3)

    def test_four_bytes(self):
        self.assertEqual(utf8.char_length(b'\xF0\x90\x82\x82'), 4)
        self.assertEqual(utf8.char_length(b'\xF3\xBF\xBF\xBF'), 4)
        self.assertEqual(utf8.char_length(b'\xF4\x8F\xBF\xBF'), 4)

        self.assertEqual(utf8.char_length(b'\xF0\x40\x40\x40'), -1)
        self.assertEqual(utf8.char_length(b'\xF0\x90\x40\x40'), -2)
        self.assertEqual(utf8.char_length(b'\xF0\x90\x82\x40'), -3)
        self.assertEqual(utf8.char_length(b'\xF0\x90\x82\xC0'), -4)

    def test_four_bytes_second_range(self):
        # Overlong encodings.
        self.assertEqual(utf8.char_length(b'\xF0\x8F\xBF\xBF'), -4)
        # Beyond U+10FFFF.
        self.assertEqual(utf8.char_length(b'\xF4\x90\x80\x80'), -4)

    def test_position(self):
        data = 'aあ©'.encode('utf-8')
        self.assertEqual(utf8.char_length(data, 0), 1)
        self.assertEqual(utf8.char_length(data, 1), 3)
        self.assertEqual(utf8.char_length(data, 4), 2)

    def test_past_end(self):
        self.assertEqual(utf8.char_length(b'', 0), 1)
        self.assertEqual(utf8.char_length(b'\xF0\x90', 0), -2)

    def test_matches_decoder(self):
        for s in ('\x7f', '\x80', '\u07ff', '\u0800', '\uffff',
                  '\U00010000', '\U0010ffff'):
            data = s.encode('utf-8')
            self.assertEqual(utf8.char_length(data), len(data), repr(s))


class TestByteClasses(TestCase):
    def test_lead(self):
        self.assertTrue(utf8.is_lead_byte(0x00))
        self.assertTrue(utf8.is_lead_byte(0x7F))
        self.assertTrue(utf8.is_lead_byte(0xC2))
        self.assertTrue(utf8.is_lead_byte(0xF4))
        self.assertFalse(utf8.is_lead_byte(0x80))
        self.assertFalse(utf8.is_lead_byte(0xC1))
        self.assertFalse(utf8.is_lead_byte(0xF5))

    def test_tail(self):
        self.assertTrue(utf8.is_tail_byte(0x80))
        self.assertTrue(utf8.is_tail_byte(0xBF))
        self.assertFalse(utf8.is_tail_byte(0x7F))
        self.assertFalse(utf8.is_tail_byte(0xC0))
