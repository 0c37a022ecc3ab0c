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

import sys
from datetime import datetime
from .engine import Engine
from .notify import samples

class Sniffer:
    '''Decode a notification stream and print every transaction.'''

    def __init__(self, lines, out=None, logfile=None, payload=False):
        self.lines = lines
        self.out = out if out is not None else sys.stdout
        self.logfile = logfile
        self.payload = payload
        self.engine = Engine()
        self.count = 0

    def format(self, transaction):
        if self.payload:
            return ' '.join('%02X' % b for b in transaction.payload())
        return str(transaction)

    def log(self, msg):
        print(msg, file=self.out, flush=True)
        if self.logfile is not None:
            timestamp = datetime.now().strftime('%H:%M:%S.%f')[:-3]
            self.logfile.write('[%s] %s\n' % (timestamp, msg))

    def run(self, fp):
        for transaction in self.engine.decode(samples(fp, self.lines)):
            self.count += 1
            self.log(self.format(transaction))
        return self.count
