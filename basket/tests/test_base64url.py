import base64
import os
import unittest

from basket.logic.share.base64url import from_base64url, to_base64url
from basket.utilities.constants import BASE64_CHUNK_SIZE
from basket.utilities.exceptions import ShareDecodeError


class TestBase64Url(unittest.TestCase):

    def test_uses_url_safe_alphabet_without_padding(self):
        data = bytes(range(256))
        encoded = to_base64url(data)
        self.assertNotIn("+", encoded)
        self.assertNotIn("/", encoded)
        self.assertNotIn("=", encoded)
        self.assertEqual(encoded, base64.urlsafe_b64encode(data).decode("ascii").rstrip("="))

    def test_padding_is_restored_on_decode(self):
        for size in range(1, 8):
            data = b"\xfb\xff" * size
            self.assertEqual(from_base64url(to_base64url(data[:size])), data[:size])

    def test_input_larger_than_one_chunk(self):
        data = os.urandom(BASE64_CHUNK_SIZE * 3 + 7)
        encoded = to_base64url(data)
        self.assertEqual(encoded, base64.urlsafe_b64encode(data).decode("ascii").rstrip("="))
        self.assertEqual(from_base64url(encoded), data)

    def test_empty(self):
        self.assertEqual(to_base64url(b""), "")
        self.assertEqual(from_base64url(""), b"")

    def test_rejects_characters_outside_alphabet(self):
        for bad in ("abc+", "ab/c", "abc=", "ab c", "abcd\n", "żółw"):
            with self.assertRaises(ShareDecodeError):
                from_base64url(bad)

    def test_rejects_impossible_length(self):
        with self.assertRaises(ShareDecodeError):
            from_base64url("abcde")
