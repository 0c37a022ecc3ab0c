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

'''Main entry point for the I2C sniffer.'''

import argparse
import sys
from .notify import (Lines, MaskError, NotifyError, ShortReadError,
                     close_notify, connect, line_mask, open_notify)
from .sniffer import Sniffer

def gpio(arg):
    try:
        index = int(arg, 0)
        line_mask(index)
    except (ValueError, MaskError) as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return index

def build_parser():
    parser = argparse.ArgumentParser(
        prog='i2cparse',
        description='Decode I2C transactions from a pigpio notification stream')
    parser.add_argument('scl', type=gpio, help='GPIO number of the SCL line (0-31)')
    parser.add_argument('sda', type=gpio, help='GPIO number of the SDA line (0-31)')
    src = parser.add_mutually_exclusive_group()
    src.add_argument('-i', '--input', metavar='FILE',
                     help='Read notification reports from FILE (default: stdin)')
    src.add_argument('--live', action='store_true',
                     help='Open a notification handle on the pigpio daemon')
    parser.add_argument('--host', help='pigpio daemon host (with --live)')
    parser.add_argument('--port', type=int, help='pigpio daemon port (with --live)')
    parser.add_argument('--logfile', help='Also append transactions to this file')
    parser.add_argument('--payload', action='store_true',
                        help='Print data bytes only, without ACK/NAK')
    return parser

def sniff(args, out):
    lines = Lines.from_gpios(args.scl, args.sda)
    print('0x%08X 0x%08X' % (lines.scl_mask, lines.sda_mask), file=out, flush=True)

    logfile = open(args.logfile, 'a', buffering=1) if args.logfile else None
    sniffer = Sniffer(lines, out=out, logfile=logfile, payload=args.payload)
    try:
        if args.live:
            pi = connect(args.host, args.port)
            try:
                handle, pipe = open_notify(pi, lines.bits)
                try:
                    sniffer.run(pipe)
                finally:
                    close_notify(pi, handle, pipe)
            finally:
                pi.stop()
        elif args.input:
            with open(args.input, 'rb') as fp:
                sniffer.run(fp)
        else:
            sniffer.run(sys.stdin.buffer)
    finally:
        if logfile is not None:
            logfile.close()
    return sniffer.count

def main(argv=None, out=None):
    args = build_parser().parse_args(argv)
    out = out if out is not None else sys.stdout
    try:
        sniff(args, out)
    except (ShortReadError, NotifyError, OSError) as e:
        print('i2cparse: %s' % str(e), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0

if __name__ == '__main__':
    sys.exit(main())
