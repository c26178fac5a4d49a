import unittest

from emojicore import Fitzpatrick


class TestFitzpatrick(unittest.TestCase):
    def test_codepoints(self):
        self.assertEqual(
            [ord(f.unicode) for f in Fitzpatrick],
            [0x1F3FB, 0x1F3FC, 0x1F3FD, 0x1F3FE, 0x1F3FF],
        )

    def test_medium_tone(self):
        self.assertEqual(Fitzpatrick.TYPE_4.unicode, "🏽")
        self.assertIs(Fitzpatrick("🏽"), Fitzpatrick.TYPE_4)
