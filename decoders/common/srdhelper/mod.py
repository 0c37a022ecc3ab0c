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

from enum import IntEnum

def compose_annot(labels, value=None):
    """Compose annotation texts in order of decreasing length.

    Each label gets the value appended after a colon. The bare value is
    added as the shortest text. Without a value the labels are returned
    as they are.

    >>> compose_annot(['Data', 'D'], '3A')
    ['Data: 3A', 'D: 3A', '3A']
    """
    if value is None:
        texts = list(labels)
    else:
        texts = ['{}: {}'.format(l, value) for l in labels]
        texts.append('{}'.format(value))
    texts.sort(key=len, reverse=True)
    return texts

class SrdIntEnum(IntEnum):
    @classmethod
    def from_list(cls, name, l):
        # Keys are limited/converted to [A-Z0-9_], values are int.
        keys = [x[0].upper().replace('-', '_') for x in l]
        return cls(name, dict(zip(keys, range(len(keys)))))

    @classmethod
    def from_str(cls, name, s):
        return cls.from_list(name, [(x,) for x in s.split()])
