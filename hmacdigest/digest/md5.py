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

#
# hmacdigest.digest.md5
#
# MD5 (RFC 1321).
#

from hmacdigest.digest import Digest_Method
from Crypto.Hash import MD5

class MD5_Digest(Digest_Method):

    name = 'md5'
    block_size = 64
    digest_size = 16

    def _new_hash(self):
        return MD5.new()

import unittest

class md5_digest_test_case(unittest.TestCase):

    def runTest(self):
        # From RFC1321
        a = MD5_Digest()
        self.assertEqual(a.hexdigest(), 'd41d8cd98f00b204e9800998ecf8427e')
        a.update(b'a')
        self.assertEqual(a.hexdigest(), '0cc175b9c0f1b6a831c399e269772661')
        a.reset().update(b'message digest')
        self.assertEqual(a.hexdigest(), 'f96b697d7cb7938d525a2f31aaf161d0')

def suite():
    suite = unittest.TestSuite()
    suite.addTest(md5_digest_test_case())
    return suite

if __name__ == '__main__':
    unittest.main(defaultTest='suite')
