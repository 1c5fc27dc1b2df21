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
   Punched cards from source lines
   -------------------------------

   Each source line becomes an 80 column record, laid out the way
   COBOL wants it on the card:

      * columns 1-6: sequence number, modulo 1,000,000
      * column 7: indicator
      * columns 8-72: the code itself
      * columns 73-80: number of the card in the deck

   Laying out a record never fails: code too long for columns 8-72 is
   cut off, and everything short is padded with blanks.  Lines which
   are too long to ever fit a card are caught by validate_lines()
   before we get this far.

   Every column of the record is then punched through the encoding.
'''

from . import hollerith
from .errors import InputTooLong

COLUMNS = 80

BODY_WIDTH = 65

# Lines indented at least this much are taken to be in card layout already
PREFORMATTED = 7

def validate_lines(lines):
    ''' Strip trailing blanks, refuse lines which cannot fit on a card '''

    result = []
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip()
        if len(line) > COLUMNS:
            raise InputTooLong(lineno, line, COLUMNS)
        result.append(line)
    return result

def split_fields(line):
    ''' Returns (indicator, code) of a source line '''

    if line.startswith(' ' * PREFORMATTED) and len(line) > PREFORMATTED:
        return line[PREFORMATTED - 1], line[PREFORMATTED:].rstrip()
    return ' ', line.strip()

def format_record(line, sequence_number):
    ''' Lay out a source line as an 80 column record '''

    indicator, code = split_fields(line)
    record = "%06d" % (sequence_number % 1000000)
    record += indicator
    record += code[:BODY_WIDTH].ljust(BODY_WIDTH)
    record += "%08d" % sequence_number
    return record[:COLUMNS].ljust(COLUMNS)

class PunchedCard():

    '''
       The holes of one card
       ~~~~~~~~~~~~~~~~~~~~~

       `columns` has a tuple of rows to punch for each of the 80
       columns, in ascending row order.
    '''

    def __init__(self, record, encoding=hollerith.HOLLERITH):
        self.record = record
        self.columns = tuple(tuple(sorted(encoding.lookup(c))) for c in record)

    @classmethod
    def from_line(cls, line, sequence_number, encoding=hollerith.HOLLERITH):
        ''' Punch a card for source line number `sequence_number` '''

        return cls(format_record(line, sequence_number), encoding)

    def __repr__(self):
        return "<PunchedCard %s>" % self.record[72:]

    def punches(self):
        ''' Yield (column, row) for every hole, column by column '''

        for col, rows in enumerate(self.columns):
            for row in rows:
                yield col, row

    def dump(self):
        ''' Debugging aid '''

        yield self.record
        for row in range(hollerith.ROWS):
            yield ''.join('#' if row in rows else '-' for rows in self.columns)

def punch_deck(lines, encoding=hollerith.HOLLERITH):
    ''' One card per line, numbered from 1 '''

    return [
        PunchedCard.from_line(line, n, encoding)
        for n, line in enumerate(lines, start=1)
    ]
