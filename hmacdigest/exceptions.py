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
# hmacdigest.exceptions
#
# Errors raised while building an HMAC_Digest.
#

class HMAC_Error(Exception):
    pass

class Unsupported_Algorithm(HMAC_Error):

    def __init__(self, algorithm):
        self.algorithm = algorithm
        HMAC_Error.__init__(self, algorithm)

    def __str__(self):
        return '<Unsupported_Algorithm: %r>' % (self.algorithm,)

class Invalid_Key(HMAC_Error):

    def __init__(self, key):
        self.key = key
        HMAC_Error.__init__(self, key)

    def __str__(self):
        return '<Invalid_Key: %s>' % (type(self.key).__name__,)
