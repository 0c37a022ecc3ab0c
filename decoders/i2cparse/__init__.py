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
I2C transaction reassembly from sampled SCL/SDA levels.

START condition (S): SDA = falling, SCL = high
Data bit sampling: SCL = rising
STOP condition (P): SDA = rising, SCL = high

All data bytes on SDA are exactly 8 bits long (transmitted MSB-first).
Each byte has to be followed by a 9th ACK/NACK bit. If that bit is low,
that indicates an ACK, if it's high that indicates a NACK.

The engine keeps every byte seen between a START and the next STOP and
hands them out as one Transaction when the STOP arrives. Bits of an
unfinished byte at STOP are dropped. A START while a transaction is
already running (repeated START) is ignored.

Documentation:
http://www.nxp.com/acrobat/usermanuals/UM10204_3.pdf (I²C-bus user manual)
http://abyz.me.uk/rpi/pigpio/pdif2.html#notify_open (notification pipe)
'''

from .engine import (DecodeResult, Edge, Engine, IDLE, PENDING, Rule, State,
                     classify)
from .message import I2cByte, Status, Transaction, parse
