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
# hmacdigest.util.encoding
#
# Text renderings of a finalized digest.
#

import base64
import binascii

def hexencode(data):
    """hexencode(data) -> str
    Lowercase hexadecimal form of <data>.
    """
    return binascii.hexlify(data).decode('ascii')

def base64encode(data):
    """base64encode(data) -> str
    Standard Base64 (with padding) form of <data>.
    """
    return base64.b64encode(data).decode('ascii')

# BubbleBabble binary data encoding, Antti Huima.
# Every two input bytes become a five character tuple; tuples are
# separated by '-' and the whole string is framed by 'x'.

_vowels = 'aeiouy'
_consonants = 'bcdfghklmnprstvzx'

def bubblebabble(data):
    """bubblebabble(data) -> str
    Human pronounceable encoding of <data>.

    >>> bubblebabble(b'')
    'xexax'
    """
    data = bytes(data)
    seed = 1
    rounds = len(data) // 2 + 1
    out = ['x']
    for i in range(rounds):
        if i + 1 < rounds or len(data) % 2:
            byte1 = data[2 * i]
            out.append(_vowels[(((byte1 >> 6) & 3) + seed) % 6])
            out.append(_consonants[(byte1 >> 2) & 15])
            out.append(_vowels[((byte1 & 3) + seed // 6) % 6])
            if i + 1 < rounds:
                byte2 = data[2 * i + 1]
                out.append(_consonants[(byte2 >> 4) & 15])
                out.append('-')
                out.append(_consonants[byte2 & 15])
                seed = (seed * 5 + byte1 * 7 + byte2) % 36
        else:
            # Even length input: close with the seed-only tuple.
            out.append(_vowels[seed % 6])
            out.append(_consonants[16])
            out.append(_vowels[seed // 6])
    out.append('x')
    return ''.join(out)
