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
# hmacdigest.digest.hashlib_digest
#
# Wraps any fixed-length constructor from the standard hashlib module,
# e.g. Hashlib_Digest('sha3_256') or Hashlib_Digest('blake2b').
#

from hmacdigest.digest import Digest_Method
import hashlib

class Hashlib_Digest(Digest_Method):

    name = 'hashlib'

    def __init__(self, algorithm):
        try:
            h = hashlib.new(algorithm)
        except (TypeError, ValueError):
            raise ValueError('Unknown hashlib algorithm: %r' % (algorithm,))
        if not h.digest_size:
            # shake_128 and friends need an output length at digest time.
            raise ValueError('Variable length hashlib algorithm: %r' % (algorithm,))
        self.algorithm = algorithm
        self.name = h.name
        self.block_size = h.block_size
        self.digest_size = h.digest_size
        Digest_Method.__init__(self)

    def _new_hash(self):
        return hashlib.new(self.algorithm)
