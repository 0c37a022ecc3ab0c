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

import pytest
import sigrokdecode as srd

from i2ctransaction.pd import Ann, ChannelError, Decoder
from i2cparse import I2cByte, Status, Transaction
import busgen

class Recorder(Decoder):
    def __init__(self, fmt='rendered'):
        super().__init__()
        self.options = {'format': fmt}
        self.out_python, self.out_ann, self.out_binary = 'py', 'ann', 'bin'
        self.puts = []

    def put(self, ss, es, output_id, data):
        self.puts.append((ss, es, output_id, data))

    def feed(self, samples):
        for self.samplenum, (scl, sda) in enumerate(samples):
            self.handle_sample(scl, sda)

    def outputs(self, output_id):
        return [p for p in self.puts if p[2] == output_id]

    def anns(self, cls):
        return [p[3][1] for p in self.outputs('ann') if p[3][0] == cls]

def test_transaction_outputs():
    d = Recorder()
    samples = busgen.transaction([0xA0, 0x55], naks=(1,))
    d.feed(samples)
    (ss, es, _, data), = d.outputs('py')
    assert data == ['TRANSACTION', Transaction([I2cByte(0xA0, Status.ACK),
                                               I2cByte(0x55, Status.NAK)])]
    assert (ss, es) == (1, len(samples) - 1)
    (_, _, _, binary), = d.outputs('bin')
    assert binary == [0, b'\xa0\x55']
    assert d.anns(Ann.TRANSACTION) == [['Transaction: [A0+55-]', 'T: [A0+55-]', '[A0+55-]']]
    assert d.anns(Ann.DATA) == [['Data: A0', 'D: A0', 'A0'], ['Data: 55', 'D: 55', '55']]
    assert d.anns(Ann.ACK) == [['ACK', 'A']]
    assert d.anns(Ann.NAK) == [['NAK', 'N']]
    assert len(d.anns(Ann.BIT)) == 16
    assert d.anns(Ann.WARNING) == []

def test_payload_format():
    d = Recorder('payload')
    d.feed(busgen.transaction([0x01, 0x02]))
    assert d.anns(Ann.TRANSACTION) == [['Transaction: 01 02', 'T: 01 02', '01 02']]

def test_partial_byte_warning():
    d = Recorder()
    d.feed(busgen.start() + busgen.byte(0x11) + busgen.partial(0x3, 4) + busgen.stop())
    warning, = d.anns(Ann.WARNING)
    assert warning[0] == 'Stop after 4 bits, partial byte dropped'
    assert d.outputs('py')[0][3][1] == Transaction([I2cByte(0x11, Status.ACK)])

def test_repeated_start_warning():
    d = Recorder()
    d.feed(busgen.start() + busgen.byte(0x11) +
           [(False, True), (True, True), (True, False)] + busgen.stop())
    assert ['Repeated start ignored', 'Sr ignored', 'Sr'] in d.anns(Ann.WARNING)

def test_stop_setup_rise_not_counted():
    d = Recorder()
    d.feed(busgen.start() + busgen.byte(0x11) + busgen.partial(0x5, 3) + busgen.stop())
    warning, = d.anns(Ann.WARNING)
    assert warning[0] == 'Stop after 3 bits, partial byte dropped'

def test_stop_right_after_data_rise_counts_one_short():
    # Bits 1, 0, 0 with SDA rising while SCL is still high after the last one.
    d = Recorder()
    d.feed(busgen.start() + busgen.byte(0x11) + busgen.partial(0x4, 3)[:-1] +
           [(True, True)])
    warning, = d.anns(Ann.WARNING)
    assert warning[0] == 'Stop after 2 bits, partial byte dropped'
    assert d.outputs('py')[0][3][1] == Transaction([I2cByte(0x11, Status.ACK)])

def test_start_registers_outputs():
    d = Decoder()
    registered = []
    d.register = lambda output_type: registered.append(output_type) or len(registered)
    d.reset()
    d.start()
    assert registered == [srd.OUTPUT_PYTHON, srd.OUTPUT_ANN, srd.OUTPUT_BINARY]
    assert (d.out_python, d.out_ann, d.out_binary) == (1, 2, 3)

def test_decode_requires_both_channels():
    d = Recorder()
    d.has_channel = lambda pin: pin == 0
    with pytest.raises(ChannelError):
        d.decode()
