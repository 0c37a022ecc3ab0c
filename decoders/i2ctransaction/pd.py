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

from common.srdhelper import SrdIntEnum, compose_annot
from i2cparse import Engine, Rule
import sigrokdecode as srd

'''
OUTPUT_PYTHON format:

Packet:
['TRANSACTION', <transaction>]

<transaction> is an i2cparse.Transaction holding every byte (value and
ACK/NAK status) seen between START and STOP. It is put once per STOP.
'''

class ChannelError(Exception):
    pass

class Pin:
    SCL, SDA = range(2)

Ann = SrdIntEnum.from_str('Ann', 'START STOP BIT ACK NAK DATA TRANSACTION WARNING')

class Decoder(srd.Decoder):
    api_version = 3
    id = 'i2ctransaction'
    name = 'I²C transaction'
    longname = 'I²C transaction reassembly'
    desc = 'Reassemble I²C transactions from SCL/SDA samples.'
    license = 'gplv2+'
    inputs = ['logic']
    outputs = ['i2ctransaction']
    tags = ['Embedded/industrial']
    channels = (
        {'id': 'scl', 'name': 'SCL', 'desc': 'Serial clock line'},
        {'id': 'sda', 'name': 'SDA', 'desc': 'Serial data line'},
    )
    options = (
        {'id': 'format', 'desc': 'Transaction text', 'default': 'rendered',
            'values': ('rendered', 'payload')},
    )
    annotations = (
        ('start', 'Start condition'),
        ('stop', 'Stop condition'),
        ('bit', 'Data bit'),
        ('ack', 'ACK'),
        ('nak', 'NAK'),
        ('data', 'Data byte'),
        ('transaction', 'Transaction'),
        ('warning', 'Warning'),
    )
    annotation_rows = (
        ('bits', 'Bits', (Ann.BIT,)),
        ('bytes', 'Bytes', (Ann.START, Ann.STOP, Ann.ACK, Ann.NAK, Ann.DATA)),
        ('transactions', 'Transactions', (Ann.TRANSACTION,)),
        ('warnings', 'Warnings', (Ann.WARNING,)),
    )
    binary = (
        ('payload', 'Transaction payload'),
    )

    def __init__(self):
        self.reset()

    def reset(self):
        self.engine = Engine()
        self.ss_transaction = None
        self.ss_byte = None
        # Annotation of the last sampled bit, put on the next SCL fall.
        self.pending_bit = None

    def start(self):
        self.out_python = self.register(srd.OUTPUT_PYTHON)
        self.out_ann = self.register(srd.OUTPUT_ANN)
        self.out_binary = self.register(srd.OUTPUT_BINARY)

    def putg(self, ss, es, cls, texts):
        self.put(ss, es, self.out_ann, [cls, texts])

    def putp(self, ss, es, data):
        self.put(ss, es, self.out_python, data)

    def putb(self, ss, es, data):
        self.put(ss, es, self.out_binary, [0, data])

    def format_transaction(self, transaction):
        if self.options['format'] == 'payload':
            return ' '.join('{:02X}'.format(b) for b in transaction.payload())
        return str(transaction)

    def handle_stop(self, ss, transaction, bitcount):
        # Assumes the last SCL rise before STOP is the STOP setup rise, which
        # samples one bit of its own. A STOP that directly follows a data bit
        # rise, with no SCL fall in between, is reported one bit short.
        if bitcount > 1:
            self.putg(ss, ss, Ann.WARNING,
                ['Stop after {} bits, partial byte dropped'.format(bitcount - 1),
                 'Partial byte dropped', 'Partial'])
        self.putg(ss, ss, Ann.STOP, ['Stop', 'P'])

        ss_t = self.ss_transaction if self.ss_transaction is not None else ss
        text = self.format_transaction(transaction)
        self.putg(ss_t, ss, Ann.TRANSACTION,
            compose_annot(['Transaction', 'T'], text))
        self.putp(ss_t, ss, ['TRANSACTION', transaction])
        if len(transaction):
            self.putb(ss_t, ss, transaction.payload())
        self.ss_transaction = None
        self.ss_byte = None

    def handle_sample(self, scl, sda):
        ss = self.samplenum
        scl_fell = self.engine.old_scl and not scl
        bitcount = self.engine.bitcount

        result = self.engine.step(scl, sda)
        rule = self.engine.last_rule

        if scl_fell and self.pending_bit is not None:
            cls, texts, ss_bit = self.pending_bit
            self.putg(ss_bit, ss, cls, texts)
            self.pending_bit = None

        if rule == Rule.START:
            self.ss_transaction = ss
            self.putg(ss, ss, Ann.START, ['Start', 'S'])
        elif rule == Rule.RESTART:
            self.putg(ss, ss, Ann.WARNING,
                ['Repeated start ignored', 'Sr ignored', 'Sr'])
        elif rule == Rule.BIT:
            if bitcount == 0:
                self.ss_byte = ss
            bit = 1 if sda else 0
            self.pending_bit = (Ann.BIT, ['{:d}'.format(bit)], ss)
        elif rule == Rule.LATCH:
            b = self.engine.bytes[-1]
            self.putg(self.ss_byte, ss, Ann.DATA,
                compose_annot(['Data', 'D'], '{:02X}'.format(b.value)))
            if sda:
                self.pending_bit = (Ann.NAK, ['NAK', 'N'], ss)
            else:
                self.pending_bit = (Ann.ACK, ['ACK', 'A'], ss)
        elif rule == Rule.STOP:
            self.pending_bit = None
            self.handle_stop(ss, result.transaction, bitcount)

    def decode(self):
        if not self.has_channel(Pin.SCL) or not self.has_channel(Pin.SDA):
            raise ChannelError('Both SCL and SDA pins required.')
        while True:
            # Every edge on either line is one sample for the engine.
            scl, sda = self.wait([{Pin.SCL: 'e'}, {Pin.SDA: 'e'}])
            self.handle_sample(scl, sda)
