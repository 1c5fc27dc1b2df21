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
   Things which stop a run
   -----------------------

   There is no such thing as half a deck of cards: all of these abort
   before anything is written.
'''

class KeypunchError(Exception):
    ''' Base class, the command line reports these and exits '''

class InputTooLong(KeypunchError):
    ''' A source line does not fit on a card '''

    def __init__(self, lineno, line, limit=80):
        self.lineno = lineno
        self.length = len(line)
        self.preview = line[:40]
        super().__init__(
            "Line %d exceeds %d columns (%d chars): %s" % (
                lineno, limit, self.length, self.preview
            )
        )

class TemplateDecodeError(KeypunchError):
    ''' The template image could not be read '''

    def __init__(self, path, reason):
        self.path = path
        super().__init__("Cannot decode template %s: %s" % (path, reason))

class OutputWriteError(KeypunchError):
    ''' The result could not be written '''

    def __init__(self, path, reason):
        self.path = path
        super().__init__("Cannot write %s: %s" % (path, reason))
