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
# hmacdigest.digest.sha2
#
# The SHA-2 family (FIPS 180-4).
#

from hmacdigest.digest import Digest_Method
from Crypto.Hash import SHA224, SHA256, SHA384, SHA512

class SHA224_Digest(Digest_Method):

    name = 'sha224'
    block_size = 64
    digest_size = 28

    def _new_hash(self):
        return SHA224.new()

class SHA256_Digest(Digest_Method):

    name = 'sha256'
    block_size = 64
    digest_size = 32

    def _new_hash(self):
        return SHA256.new()

class SHA384_Digest(Digest_Method):

    name = 'sha384'
    block_size = 128
    digest_size = 48

    def _new_hash(self):
        return SHA384.new()

class SHA512_Digest(Digest_Method):
    """SHA512_Digest(truncate=None)

    <truncate> selects SHA-512/224 ('224') or SHA-512/256 ('256').
    """

    name = 'sha512'
    block_size = 128
    digest_size = 64

    truncated_sizes = {
        None: 64,
        '224': 28,
        '256': 32,
    }

    def __init__(self, truncate=None):
        if truncate not in self.truncated_sizes:
            raise ValueError('Unsupported SHA-512 truncation: %r' % (truncate,))
        self.truncate = truncate
        self.digest_size = self.truncated_sizes[truncate]
        Digest_Method.__init__(self)

    def _new_hash(self):
        return SHA512.new(truncate=self.truncate)
