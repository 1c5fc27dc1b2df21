#!/usr/bin/env python3
#
# BSD 2-Clause License
#
# SPDX-License-Identifier: BSD-2-Clause
#
# Copyright (c) 2020-2025, Poul-Henning Kamp
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice, this
#    list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.


'''
   Hollerith encoding
   ------------------

   Which holes to punch for a character.

   Rows are counted from the top edge of the card:

      row   0   1   2   3   4   5   6   7   8   9  10  11
      zone 12  11   0   1   2   3   4   5   6   7   8   9

   The character set is the small one our keypunch has always had,
   not the full IBM 029 set.  Letters and digits are standard, but
   the special characters are a handful of fixed combinations which
   do not all agree with the 029: '+' and '=' share 12-6, and the
   two quote characters share 12-8.
'''

from types import MappingProxyType

ROWS = 12

NO_HOLES = frozenset()

SPECIALS = {
    '.': (0, 1, 10),	# 12-11-8
    ',': (0, 5),	# 12-3
    '(': (0, 7),	# 12-5
    ')': (1, 7),	# 11-5
    '+': (0, 8),	# 12-6
    '-': (1,),		# 11
    '*': (1, 6),	# 11-4
    '/': (2, 3),	# 0-1
    '=': (0, 8),	# 12-6, same as '+'
    '$': (1, 5),	# 11-3
    "'": (0, 10),	# 12-8
    ':': (4, 10),	# 2-8
    ';': (0, 1, 8),	# 12-11-6
    '"': (0, 10),	# 12-8, same as "'"
}

def build_table():
    ''' Construct the character to punch-rows mapping '''

    table = {' ': ()}

    # Zone 12 with digits 1-9
    for n, c in enumerate("ABCDEFGHI"):
        table[c] = (0, n + 3)

    # Zone 11 with digits 1-9
    for n, c in enumerate("JKLMNOPQR"):
        table[c] = (1, n + 3)

    # Zone 0 with digits 2-9
    for n, c in enumerate("STUVWXYZ"):
        table[c] = (2, n + 4)

    for n, c in enumerate("0123456789"):
        table[c] = (n + 2,)

    table.update(SPECIALS)
    return {c: frozenset(r) for c, r in table.items()}

def first_upper(char):
    ''' Upper case, one column: 'ß' punches as 'S', not as nothing '''

    return char.upper()[:1]

class Encoding():

    '''
       Character to punch-rows
       ~~~~~~~~~~~~~~~~~~~~~~~

       Lookups are case-insensitive, and characters we have no
       holes for come back as an empty set rather than an error:
       a keypunch just skips a column it cannot punch.
    '''

    def __init__(self, table):
        self.table = MappingProxyType(dict(table))

    def __contains__(self, char):
        return first_upper(char) in self.table

    def lookup(self, char):
        ''' Rows to punch for `char` '''

        return self.table.get(first_upper(char), NO_HOLES)

HOLLERITH = Encoding(build_table())
