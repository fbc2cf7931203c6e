import unittest
from quickasm.common import FormatError
from quickasm.utils.words import split_words, format_words, pack_words
from quickasm.utils.words import Word32, Word16, TailBytes, parse_word


class SplitWordsTestCase(unittest.TestCase):
    """ Splitting raw images into word tokens """
    def test_empty(self):
        self.assertEqual([], list(split_words(b'')))
        self.assertEqual([], list(format_words(b'')))

    def test_single_byte(self):
        self.assertEqual([TailBytes(b'\x07')], list(split_words(b'\x07')))
        self.assertEqual(['[7]'], list(format_words(b'\x07')))

    def test_half_word(self):
        self.assertEqual([Word16(0xbeef)], list(split_words(b'\xef\xbe')))

    def test_three_bytes(self):
        """ Three bytes never collapse into a single word """
        tokens = list(split_words(bytes([0x01, 0x02, 0x03])))
        self.assertEqual([Word16(0x0201), TailBytes(b'\x03')], tokens)
        self.assertEqual(
            ['0201', '[3]'], list(format_words(bytes([0x01, 0x02, 0x03]))))

    def test_little_endian(self):
        tokens = list(format_words(bytes([0x01, 0x00, 0xa0, 0xe1])))
        self.assertEqual(['e1a00001'], tokens)

    def test_zero_padding(self):
        self.assertEqual(
            ['00000001', '0002'], list(format_words(bytes([1, 0, 0, 0, 2, 0]))))

    def test_six_bytes(self):
        tokens = list(format_words(bytes(range(1, 7))))
        self.assertEqual(['04030201', '0605'], tokens)
        self.assertEqual([8, 4], [len(t) for t in tokens])

    def test_order_of_groups(self):
        tokens = list(split_words(bytes(range(7))))
        self.assertEqual(
            [Word32, Word16, TailBytes], [type(t) for t in tokens])

    def test_multiple_of_four(self):
        for length in (4, 8, 12, 64):
            data = bytes(range(length))
            tokens = list(split_words(data))
            self.assertEqual(length // 4, len(tokens))
            self.assertTrue(all(isinstance(t, Word32) for t in tokens))

    def test_every_byte_consumed(self):
        for length in range(0, 20):
            data = bytes((i * 37 + 11) & 0xff for i in range(length))
            tokens = list(split_words(data))
            self.assertEqual(length, sum(t.size for t in tokens))
            fractional = [t for t in tokens if not isinstance(t, Word32)]
            self.assertLessEqual(len(fractional), 2)
            rebuilt = bytearray()
            for token in tokens:
                if isinstance(token, Word32):
                    rebuilt.extend(token.value.to_bytes(4, 'little'))
                elif isinstance(token, Word16):
                    rebuilt.extend(token.value.to_bytes(2, 'little'))
                else:
                    rebuilt.extend(token.data)
            self.assertEqual(data, bytes(rebuilt))

    def test_lazy(self):
        tokens = split_words(bytes(8))
        self.assertEqual(Word32(0), next(tokens))
        self.assertEqual(Word32(0), next(tokens))
        with self.assertRaises(StopIteration):
            next(tokens)


class PackWordsTestCase(unittest.TestCase):
    """ Packing hexadecimal tokens into a buffer """
    def test_empty(self):
        self.assertEqual(b'', pack_words(''))
        self.assertEqual(b'', pack_words('\n\n'))

    def test_two_words(self):
        self.assertEqual(
            bytes.fromhex('0100000002000000'), pack_words('1\n2'))

    def test_trailing_newline_and_spaces(self):
        self.assertEqual(
            bytes.fromhex('0001a0e1'), pack_words('  e1a00100 \r\n'))

    def test_upper_case(self):
        self.assertEqual(bytes.fromhex('efbeadde'), pack_words('DEADBEEF'))

    def test_max_value(self):
        self.assertEqual(b'\xff\xff\xff\xff', pack_words('ffffffff'))
        self.assertEqual(b'\xff\xff\xff\xff', pack_words('0000ffffffff'))

    def test_too_large(self):
        with self.assertRaises(FormatError) as cm:
            pack_words('100000000')
        self.assertEqual('100000000', cm.exception.token)

    def test_invalid_characters(self):
        for token in ('xyz', '12g4', '-1', '+1', '0x10', '1_0'):
            with self.assertRaises(FormatError) as cm:
                pack_words('1\n{}\n2'.format(token))
            self.assertEqual(token, cm.exception.token)

    def test_parse_word(self):
        self.assertEqual(0xe1a00001, parse_word('e1a00001'))

    def test_partial_tokens_are_not_packed_as_half_words(self):
        """ Packing formatted output only gives back whole words """
        data = bytes(range(1, 7))
        text = '\n'.join(format_words(data))
        self.assertEqual('04030201\n0605', text)
        self.assertNotEqual(data, pack_words(text))
        self.assertEqual(8, len(pack_words(text)))


if __name__ == '__main__':
    unittest.main()
