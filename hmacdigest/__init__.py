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

"""HMAC keyed hashing over pluggable digest algorithms.

    from hmacdigest import HMAC_Digest, hexdigest

    # one-liner
    hexdigest(b'data', b'hash key', 'sha1')

    # incremental
    h = HMAC_Digest(b'foo', 'rmd160')
    h.update(chunk)
    h.bubblebabble()
"""

from hmacdigest.algorithms import get_algorithm, supported_algorithms
from hmacdigest.exceptions import HMAC_Error, Invalid_Key, Unsupported_Algorithm
from hmacdigest.hmac_digest import HMAC_Digest

__version__ = '1.0.0'

def hmac(data, key, algorithm, *params):
    """hmac(data, key, algorithm, *params) -> bytes
    Same as HMAC_Digest(key, algorithm, *params).update(data).digest().
    """
    return HMAC_Digest(key, algorithm, *params).update(data).digest()

def hexdigest(data, key, algorithm, *params):
    """hexdigest(data, key, algorithm, *params) -> str
    Lowercase hex form of hmac(data, key, algorithm, *params).
    """
    return HMAC_Digest(key, algorithm, *params).update(data).hexdigest()

def base64digest(data, key, algorithm, *params):
    """base64digest(data, key, algorithm, *params) -> str
    Base64 form of hmac(data, key, algorithm, *params).
    """
    return HMAC_Digest(key, algorithm, *params).update(data).base64digest()

def bubblebabble(data, key, algorithm, *params):
    """bubblebabble(data, key, algorithm, *params) -> str
    BubbleBabble form of hmac(data, key, algorithm, *params).
    """
    return HMAC_Digest(key, algorithm, *params).update(data).bubblebabble()
