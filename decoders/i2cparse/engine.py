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

# TODO: Emit the in-progress transaction on a repeated START instead of
#       ignoring the START condition.

from collections import namedtuple
from enum import Enum
from .message import I2cByte, Status, Transaction

class Edge(Enum):
    RISING = 'r'
    FALLING = 'f'
    STEADY = 's'

class State(Enum):
    IDLE = 0
    PENDING = 1
    COMPLETE = 2

class Rule(Enum):
    NONE = 0
    STOP = 1
    START = 2
    BIT = 3
    LATCH = 4
    RESTART = 5

DecodeResult = namedtuple('DecodeResult', 'state transaction')

IDLE = DecodeResult(State.IDLE, None)
PENDING = DecodeResult(State.PENDING, None)

def classify(prev, curr):
    '''Return the behaviour of one line between two consecutive samples.'''
    if prev == curr:
        return Edge.STEADY
    return Edge.RISING if curr else Edge.FALLING

class Engine:
    '''
    Reassemble I2C transactions from SCL/SDA samples.

    Feed every sample with step(), in the order they were taken. Samples
    may repeat the same levels any number of times, but every transition
    of either line has to be visible in at least one sample.
    '''

    def __init__(self):
        self.reset()

    def reset(self):
        # Idle bus: both lines pulled high.
        self.old_scl = True
        self.old_sda = True
        self.partial = 0
        self._bitcount = 0
        self._active = False
        self.bytes = []
        self.last_rule = Rule.NONE

    @property
    def active(self):
        return self._active

    @property
    def bitcount(self):
        return self._bitcount

    def step(self, scl, sda):
        scl, sda = bool(scl), bool(sda)
        scl_edge = classify(self.old_scl, scl)
        sda_edge = classify(self.old_sda, sda)
        self.old_scl, self.old_sda = scl, sda
        self.last_rule = Rule.NONE

        if scl_edge == Edge.STEADY and scl:
            # START (S): SCL = high, SDA = falling.
            # STOP (P): SCL = high, SDA = rising.
            if sda_edge == Edge.RISING and self._active:
                return self.handle_stop()
            elif sda_edge == Edge.FALLING and not self._active:
                self._active = True
                self.last_rule = Rule.START
            elif sda_edge == Edge.FALLING:
                self.last_rule = Rule.RESTART
        elif scl_edge == Edge.RISING and self._active:
            if self._bitcount < 8:
                # Data bits are transmitted MSB-first.
                self.partial = ((self.partial << 1) | int(sda)) & 0xff
                self._bitcount += 1
                self.last_rule = Rule.BIT
            else:
                # 9th bit: ACK (SDA low) or NAK (SDA high).
                status = Status.NAK if sda else Status.ACK
                self.bytes.append(I2cByte(self.partial, status))
                self.partial = 0
                self._bitcount = 0
                self.last_rule = Rule.LATCH

        return PENDING if self._active else IDLE

    def handle_stop(self):
        # Bits of an unfinished byte are dropped.
        transaction = Transaction(self.bytes)
        self.bytes = []
        self.partial = 0
        self._bitcount = 0
        self._active = False
        self.last_rule = Rule.STOP
        return DecodeResult(State.COMPLETE, transaction)

    def decode(self, samples):
        '''Yield each completed Transaction from (scl, sda) pairs.'''
        for scl, sda in samples:
            result = self.step(scl, sda)
            if result.state == State.COMPLETE:
                yield result.transaction
