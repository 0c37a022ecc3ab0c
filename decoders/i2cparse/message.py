##
## This file is part of the i2cparse project.
##
## Copyright (C) 2026 i2cparse contributors
##
## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU General Public License as published by
## the Free Software Foundation; either version 2 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU General Public License for more details.
##
## You should have received a copy of the GNU General Public License
## along with this program; if not, see <http://www.gnu.org/licenses/>.
##

import re
from collections import namedtuple
from enum import Enum

'''
Rendered transaction format:

[<byte><status><byte><status>...]

<byte> is the data byte as two uppercase hex digits, <status> is '+' for
an ACK and '-' for a NAK. An empty transaction (START directly followed
by STOP) renders as '[]'.

Example: [A0+10+A1+55-]
'''

class Status(Enum):
    # Values are the rendered suffix.
    ACK = '+'
    NAK = '-'

I2cByte = namedtuple('I2cByte', 'value status')

class Transaction:
    '''All bytes seen between a START and the next STOP, in bus order.'''

    def __init__(self, data=()):
        self.data = tuple(data)

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, idx):
        return self.data[idx]

    def __eq__(self, other):
        if not isinstance(other, Transaction):
            return NotImplemented
        return self.data == other.data

    def __hash__(self):
        return hash(self.data)

    def __repr__(self):
        return 'Transaction(%r)' % (self.data,)

    def __str__(self):
        return '[' + ''.join('{:02X}{}'.format(b.value, b.status.value)
                             for b in self.data) + ']'

    def payload(self):
        '''Return the byte values only, discarding ACK/NAK.'''
        return bytes(b.value for b in self.data)

_render_re = re.compile(r'([0-9A-F]{2})([+-])')

def parse(text):
    '''Turn a rendered transaction back into a Transaction.'''
    if len(text) < 2 or text[0] != '[' or text[-1] != ']':
        raise ValueError('Not a rendered transaction: %r' % text)
    body = text[1:-1]
    if len(body) % 3:
        raise ValueError('Truncated byte in %r' % text)
    data = []
    for pos in range(0, len(body), 3):
        m = _render_re.fullmatch(body, pos, pos + 3)
        if m is None:
            raise ValueError('Malformed byte %r in %r' % (body[pos:pos + 3], text))
        data.append(I2cByte(int(m.group(1), 16), Status(m.group(2))))
    return Transaction(data)
