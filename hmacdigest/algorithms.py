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
# hmacdigest.algorithms
#
# The registry of digest algorithms HMAC_Digest knows by name.
#

from hmacdigest.digest.md5 import MD5_Digest
from hmacdigest.digest.sha1 import SHA1_Digest
from hmacdigest.digest.rmd160 import RIPEMD160_Digest
from hmacdigest.digest.sha2 import SHA224_Digest, SHA256_Digest, SHA384_Digest, SHA512_Digest
from hmacdigest.digest.hashlib_digest import Hashlib_Digest
from hmacdigest.exceptions import Unsupported_Algorithm
from hmacdigest.util import pick_from_list

supported_algorithms = [
    MD5_Digest,
    SHA1_Digest,
    RIPEMD160_Digest,
    SHA224_Digest,
    SHA256_Digest,
    SHA384_Digest,
    SHA512_Digest,
    Hashlib_Digest,
]

def get_algorithm(algorithm):
    """get_algorithm(algorithm) -> digest class
    Resolves <algorithm> to something that builds a digest instance.

    <algorithm> may be the name of one of the supported_algorithms
    (e.g. 'sha1') or a Digest_Method subclass, which is returned as is.

    Raises Unsupported_Algorithm for unknown names.
    """
    if isinstance(algorithm, str):
        digest_class = pick_from_list(algorithm.lower(), supported_algorithms)
        if digest_class is None:
            raise Unsupported_Algorithm(algorithm)
        return digest_class
    if callable(algorithm):
        return algorithm
    raise Unsupported_Algorithm(algorithm)
