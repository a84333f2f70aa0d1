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
# hmacdigest.util
#
# Utility functions for the HMAC code.
#

def pick_from_list(name, algorithms):
    """pick_from_list(name, algorithms) -> algorithm
    Picks the algorithm from the list based on the name.

    <name> - The name (a string) to find.
    <algorithms> - List of algorithm classes that have a "name" attribute.

    Returns None if no match found.
    """
    for algorithm in algorithms:
        if algorithm.name == name:
            return algorithm
    return None

def bytes_xor(a, b):
    """bytes_xor(a, b) -> bytes
    Returns a^b for every byte in <a> and <b>.
    <a> and <b> must be byte strings of equal length.
    """
    return bytes(x ^ y for x, y in zip(a, b))

def is_bytes_like(data):
    return isinstance(data, (bytes, bytearray, memoryview))
