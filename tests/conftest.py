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

# The decoder imports sigrokdecode, which only exists inside a running
# libsigrokdecode. Outside of it, stand in the few names the decoder uses.

import sys
import types

try:
    import sigrokdecode
except ImportError:
    srd = types.ModuleType('sigrokdecode')

    class Decoder:
        pass

    srd.Decoder = Decoder
    srd.OUTPUT_ANN = 0
    srd.OUTPUT_PYTHON = 1
    srd.OUTPUT_BINARY = 2
    srd.OUTPUT_LOGIC = 3
    srd.OUTPUT_META = 4
    srd.SRD_CONF_SAMPLERATE = 0
    sys.modules['sigrokdecode'] = srd
