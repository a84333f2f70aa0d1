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
# hmacdigest.digest
#
# This is the interface to the underlying hash algorithms.
#

from hmacdigest.util import encoding

class Digest_Instance:
    """Digest_Instance

    Presentation methods shared by anything that produces a digest.
    Subclasses provide digest(), block_size and digest_size.
    """
    block_size = 0
    digest_size = 0

    def digest(self):
        raise NotImplementedError

    def hexdigest(self):
        return encoding.hexencode(self.digest())

    def base64digest(self):
        return encoding.base64encode(self.digest())

    def bubblebabble(self):
        return encoding.bubblebabble(self.digest())

    def digest_length(self):
        return self.digest_size

    def block_length(self):
        return self.block_size

class Digest_Method(Digest_Instance):
    """Digest_Method

    Base class for any hash algorithm HMAC can be built on.

    Subclasses set name, block_size and digest_size and implement
    _new_hash(), which returns a fresh hash object with the same API as
    the objects in Crypto.Hash and hashlib:
        - update(bytes)
        - digest()
        - copy()
    """
    name = 'none'

    def __init__(self):
        self._hash = self._new_hash()

    def _new_hash(self):
        raise NotImplementedError

    def reset(self):
        self._hash = self._new_hash()
        return self

    def update(self, data):
        self._hash.update(data)
        return self

    def digest(self):
        # Finalize a snapshot so this object can keep taking updates.
        return self._hash.copy().digest()

    def copy(self):
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        other._hash = self._hash.copy()
        return other

    __copy__ = copy

    def __repr__(self):
        return '<%s: %s>' % (self.name.upper(), self.hexdigest())
