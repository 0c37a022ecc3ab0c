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

'''
pigpio notification pipe reader.

Every GPIO level change seen by the pigpio daemon is written to the
notification pipe (/dev/pigpio<handle>) as one 12-byte report:

 - seqno: 16 bit sequence number (wraps)
 - flags: 16 bit flags (watchdog, keepalive, event)
 - tick:  32 bit microseconds since boot (wraps)
 - level: 32 bit levels of GPIO 0-31

All fields are little endian. Only the level field is of interest for
the I2C engine, the others are passed through for callers who want them.
'''

import struct
from collections import namedtuple
import pigpio

REPORT_FORMAT = '<HHII'
REPORT_SIZE = struct.calcsize(REPORT_FORMAT)

PIPE_PATH = '/dev/pigpio%d'

class MaskError(Exception):
    pass

class ShortReadError(Exception):
    pass

class NotifyError(Exception):
    pass

class Report(namedtuple('Report', 'seqno flags tick level')):
    __slots__ = ()

    @classmethod
    def unpack(cls, buf):
        return cls._make(struct.unpack(REPORT_FORMAT, buf))

    def pack(self):
        return struct.pack(REPORT_FORMAT, *self)

def line_mask(index):
    '''Return the level mask of GPIO index (0-31).'''
    if isinstance(index, bool) or not isinstance(index, int):
        raise MaskError('GPIO index must be an integer: %r' % (index,))
    if not 0 <= index <= 31:
        raise MaskError('GPIO index out of range 0-31: %d' % index)
    return 1 << index

class Lines:
    '''Map a level bit-field onto the (scl, sda) pair.'''

    def __init__(self, scl_mask, sda_mask):
        self.scl_mask = scl_mask
        self.sda_mask = sda_mask

    @classmethod
    def from_gpios(cls, scl, sda):
        return cls(line_mask(scl), line_mask(sda))

    @property
    def bits(self):
        return self.scl_mask | self.sda_mask

    def resolve(self, level):
        scl = (level & self.scl_mask) == self.scl_mask
        sda = (level & self.sda_mask) == self.sda_mask
        return scl, sda

def read_reports(fp):
    while True:
        buf = fp.read(REPORT_SIZE)
        if not buf:
            return
        # Pipes may hand out less than asked for, keep reading.
        while len(buf) < REPORT_SIZE:
            more = fp.read(REPORT_SIZE - len(buf))
            if not more:
                raise ShortReadError('Truncated report: got %d of %d bytes'
                                     % (len(buf), REPORT_SIZE))
            buf += more
        yield Report.unpack(buf)

def samples(fp, lines):
    for report in read_reports(fp):
        yield lines.resolve(report.level)

def connect(host=None, port=None):
    kwargs = {}
    if host is not None:
        kwargs['host'] = host
    if port is not None:
        kwargs['port'] = port
    pi = pigpio.pi(**kwargs)
    if not pi.connected:
        raise NotifyError('Failed to connect to pigpio daemon')
    return pi

def open_notify(pi, bits):
    '''Start notifications for the GPIOs in bits, return (handle, pipe).'''
    if not pi.connected:
        raise NotifyError('Not connected to pigpio daemon')
    try:
        handle = pi.notify_open()
    except pigpio.error as e:
        raise NotifyError('Cannot open notification handle: %s' % str(e)) from e
    try:
        pipe = open(PIPE_PATH % handle, 'rb')
    except OSError as e:
        pi.notify_close(handle)
        raise NotifyError('Cannot open notification pipe: %s' % str(e)) from e
    try:
        pi.notify_begin(handle, bits)
    except pigpio.error as e:
        close_notify(pi, handle, pipe)
        raise NotifyError('Cannot begin notifications: %s' % str(e)) from e
    return handle, pipe

def close_notify(pi, handle, pipe):
    pipe.close()
    pi.notify_close(handle)
