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
   Coding sheet
   ------------

   The deck as text, in the columns of a COBOL coding form, so people
   can check what went on the cards without reading holes.
'''

from .card import COLUMNS, format_record

RULE = "=" * COLUMNS

def coding_sheet(lines):
    ''' Text rendering of the deck, one row per card '''

    out = [
        RULE,
        "COBOL CODING SHEET".center(COLUMNS).rstrip(),
        RULE,
        "SEQ   IND         COBOL CODE (Columns 8-72)                             CARD",
        "1-6   78       16      24      32      40      48      56      64       73-80",
        "-" * COLUMNS,
    ]
    for n, line in enumerate(lines, start=1):
        record = format_record(line, n)
        out.append(
            "%s  %s  %s  %s" % (record[:6], record[6], record[7:72], record[72:])
        )
    out.append(RULE)
    out.append("Total Cards: %d" % len(lines))
    out.append(RULE)
    return "\n".join(out) + "\n"
