##
## This file is part of the libsigrokdecode project.
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
This decoder reassembles I²C transactions straight from the SCL and SDA
lines, using the same engine as the i2cparse pigpio sniffer.

Every byte between a START and the next STOP condition is collected
together with its ACK/NAK bit. At STOP the whole transaction is put as
one annotation, rendered as [<hex><+|->...], e.g. [A0+10+A1+55-], or as
plain hex payload when the 'format' option is set to 'payload'.

Unlike the i2c decoder there is no address/data distinction and no
repeated START support: a START seen while a transaction is running is
flagged as a warning and otherwise ignored. A STOP in the middle of a
byte drops the bits collected so far, which is flagged as well.
'''

from .pd import Decoder
