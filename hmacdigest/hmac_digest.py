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
# hmacdigest.hmac_digest
#
# This implements the HMAC keyed-hashing algorithm from RFC 2104 on top of
# any Digest_Method.
#

from hmacdigest.algorithms import get_algorithm
from hmacdigest.digest import Digest_Instance
from hmacdigest.exceptions import Invalid_Key, Unsupported_Algorithm
from hmacdigest.util import bytes_xor, is_bytes_like
from hmacdigest.util import debug as hmac_debug

class HMAC_Digest(Digest_Instance):
    """HMAC_Digest(key, algorithm, *params)

    Keyed digest over <algorithm>, which is a registered name such as
    'sha1' or a Digest_Method subclass.  <params> are passed to the
    algorithm's constructor, e.g. HMAC_Digest(key, 'sha512', '256').

    Every update() call runs the whole nested construction
    H(K XOR opad, H(K XOR ipad, data)) on just the data of that call and
    appends the outer input (opad || inner hash) to a running outer
    digest that is only cleared by reset().  A single update() on a fresh
    instance is therefore plain RFC 2104 HMAC, but the same data split
    across several update() calls gives a different result.  This is not
    streaming HMAC; keep it that way, existing tags depend on it.

    Comparing tags for verification needs a constant time comparison
    (e.g. hmac.compare_digest from the standard library); none is
    provided here.
    """

    debug = hmac_debug.Debug()

    # The part of the Digest_Method API the algorithm must provide.
    required_methods = ('reset', 'update', 'digest', 'copy')

    def __init__(self, key, algorithm, *params):
        if not is_bytes_like(key):
            raise Invalid_Key(key)
        self.digest_class = get_algorithm(algorithm)
        self.digest_params = params
        try:
            self._md = self._new_digest()
        except (TypeError, ValueError, NotImplementedError) as e:
            raise Unsupported_Algorithm(algorithm) from e
        for method in self.required_methods:
            if not callable(getattr(self._md, method, None)):
                raise Unsupported_Algorithm(algorithm)
        self.block_size = getattr(self._md, 'block_size', 0)
        self.digest_size = getattr(self._md, 'digest_size', 0)
        if self.block_size <= 0 or self.digest_size <= 0:
            raise Unsupported_Algorithm(algorithm)
        self._set_key(bytes(key))

    def _new_digest(self):
        return self.digest_class(*self.digest_params)

    def _set_key(self, key):
        if len(key) > self.block_size:
            # Key is too big.  Hash it and use the result as the key.
            self.debug.write(hmac_debug.DEBUG_2,
                             'HMAC key is longer than the block size (%i > %i), hashing it',
                             (len(key), self.block_size))
            h = self._new_digest()
            h.update(key)
            key = h.digest()
        padded_key = key + b'\0' * (self.block_size - len(key))

        self.key = key
        self.ipad = bytes_xor(padded_key, b'\x36' * self.block_size)
        self.opad = bytes_xor(padded_key, b'\x5c' * self.block_size)

    def update(self, data):
        if not is_bytes_like(data):
            raise TypeError('HMAC data must be bytes-like, not %s' % (type(data).__name__,))
        # H(K XOR opad, H(K XOR ipad, text))
        inner = self._new_digest()
        inner.update(self.ipad)
        inner.update(data)
        self._md.update(self.opad)
        self._md.update(inner.digest())
        return self

    def reset(self):
        self._md.reset()
        return self

    def digest(self):
        return self._md.digest()

    def finish(self):
        """finish(self) -> bytes
        Returns the digest and resets the instance.
        """
        result = self.digest()
        self.reset()
        return result

    def copy(self):
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        other._md = self._md.copy()
        return other

    __copy__ = copy

    def __repr__(self):
        name = getattr(self._md, 'name', self.digest_class.__name__)
        return '<%s: key=%r, digest=%s: %s>' % (
            self.__class__.__name__, self.key, name.upper(), self.hexdigest())
