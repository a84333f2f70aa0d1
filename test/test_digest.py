# Copyright (c) 2002-2012 IronPort Systems and Cisco Systems
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import copy
import hashlib
import unittest

from hmacdigest import Unsupported_Algorithm
from hmacdigest.algorithms import get_algorithm, supported_algorithms
from hmacdigest.digest.hashlib_digest import Hashlib_Digest
from hmacdigest.digest.md5 import MD5_Digest
from hmacdigest.digest.sha1 import SHA1_Digest
from hmacdigest.digest.rmd160 import RIPEMD160_Digest
from hmacdigest.digest.sha2 import SHA224_Digest, SHA256_Digest, SHA384_Digest, SHA512_Digest

fixed_algorithms = [
    MD5_Digest,
    SHA1_Digest,
    RIPEMD160_Digest,
    SHA224_Digest,
    SHA256_Digest,
    SHA384_Digest,
    SHA512_Digest,
]

class digest_method_test_case(unittest.TestCase):

    def test_sizes(self):
        for digest_class in fixed_algorithms:
            d = digest_class()
            self.assertEqual(len(d.digest()), d.digest_size)
            self.assertEqual(d.digest_length(), digest_class.digest_size)
            self.assertEqual(d.block_length(), digest_class.block_size)

    def test_against_hashlib(self):
        data = b'abc' * 100
        for digest_class in fixed_algorithms:
            if digest_class is RIPEMD160_Digest:
                # Not always compiled into hashlib.
                continue
            reference = hashlib.new(digest_class.name, data)
            d = digest_class().update(data)
            self.assertEqual(d.digest(), reference.digest())
            self.assertEqual(d.block_size, reference.block_size)

    def test_rmd160(self):
        d = RIPEMD160_Digest()
        self.assertEqual(d.hexdigest(), '9c1185a5c5e9fc54612808977ee8f548b2258d31')
        d.update(b'abc')
        self.assertEqual(d.hexdigest(), '8eb208f7e05d987a9b044a8e98c6b087f15a0bfc')

    def test_sha512_truncate(self):
        d = SHA512_Digest('256').update(b'abc')
        self.assertEqual(d.digest_size, 32)
        self.assertEqual(
            d.hexdigest(),
            '53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23')
        self.assertEqual(SHA512_Digest('224').digest_size, 28)
        self.assertEqual(SHA512_Digest.digest_size, 64)
        self.assertRaises(ValueError, SHA512_Digest, '384')

    def test_digest_is_repeatable(self):
        d = SHA1_Digest().update(b'a')
        self.assertEqual(d.digest(), d.digest())
        d.update(b'bc')
        self.assertEqual(d.digest(), hashlib.sha1(b'abc').digest())

    def test_reset(self):
        d = MD5_Digest().update(b'junk')
        self.assertIs(d.reset(), d)
        self.assertEqual(d.hexdigest(), 'd41d8cd98f00b204e9800998ecf8427e')

    def test_copy(self):
        d = SHA256_Digest().update(b'a')
        c = d.copy()
        c.update(b'b')
        self.assertEqual(d.digest(), hashlib.sha256(b'a').digest())
        self.assertEqual(c.digest(), hashlib.sha256(b'ab').digest())
        c2 = copy.copy(SHA512_Digest('256'))
        self.assertEqual(c2.digest_size, 32)

    def test_repr(self):
        self.assertEqual(repr(MD5_Digest()), '<MD5: d41d8cd98f00b204e9800998ecf8427e>')

class hashlib_digest_test_case(unittest.TestCase):

    def test_sha3(self):
        d = Hashlib_Digest('sha3_256')
        self.assertEqual(d.name, 'sha3_256')
        self.assertEqual(d.block_size, 136)
        self.assertEqual(d.digest_size, 32)
        d.update(b'abc')
        self.assertEqual(d.digest(), hashlib.sha3_256(b'abc').digest())
        c = d.copy()
        c.update(b'def')
        self.assertEqual(d.digest(), hashlib.sha3_256(b'abc').digest())
        self.assertEqual(c.digest(), hashlib.sha3_256(b'abcdef').digest())
        d.reset()
        self.assertEqual(d.digest(), hashlib.sha3_256(b'').digest())

    def test_unknown(self):
        self.assertRaises(ValueError, Hashlib_Digest, 'no-such-hash')
        self.assertRaises(ValueError, Hashlib_Digest, 'shake_256')

class registry_test_case(unittest.TestCase):

    def test_names(self):
        for digest_class in supported_algorithms:
            self.assertIs(get_algorithm(digest_class.name), digest_class)
        self.assertIs(get_algorithm('SHA1'), SHA1_Digest)
        self.assertIs(get_algorithm('rmd160'), RIPEMD160_Digest)

    def test_class_passthrough(self):
        self.assertIs(get_algorithm(SHA256_Digest), SHA256_Digest)

    def test_unknown(self):
        self.assertRaises(Unsupported_Algorithm, get_algorithm, 'crc32')
        self.assertRaises(Unsupported_Algorithm, get_algorithm, None)

if __name__ == '__main__':
    unittest.main()
