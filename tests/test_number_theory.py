import unittest

from eccore.number_theory_stuff import miller_rabin


class TestMillerRabin(unittest.TestCase):

    def test_primes(self):
        for n in (2, 3, 5, 7, 17, 7919, 2 ** 61 - 1, 2 ** 127 - 1,
                  0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F):
            self.assertTrue(miller_rabin(n), n)

    def test_composites(self):
        for n in (0, 1, 4, 9, 15, 561, 1105, 7917, (2 ** 61 - 1) * (2 ** 31 - 1)):
            self.assertFalse(miller_rabin(n), n)

    def test_negative(self):
        self.assertFalse(miller_rabin(-7))


if __name__ == '__main__':
    unittest.main()
