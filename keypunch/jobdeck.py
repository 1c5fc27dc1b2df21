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
   JCL around the source deck
   --------------------------

   A COBOL deck on its own does nothing, it needs job control cards
   in front of and behind it to get compiled, link-edited and run.
   The source cards go between header and footer, right after the
   "//SYSIN DD *" card of the compile step.
'''

DEFAULT_PROGRAM = "COBPROG"

def program_name(lines, default=DEFAULT_PROGRAM):
    ''' The name from the PROGRAM-ID paragraph, if there is one '''

    for line in lines:
        pos = line.upper().find("PROGRAM-ID")
        if pos < 0:
            continue
        words = line[pos + len("PROGRAM-ID"):].lstrip('.').split()
        if not words:
            return default
        return words[0].replace('.', '').upper() or default
    return default

class JobDeck():

    '''
       Job control header and footer
       ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    '''

    def __init__(self, header, footer):
        self.header = list(header)
        self.footer = list(footer)

    def __len__(self):
        return len(self.header) + len(self.footer)

    def wrap(self, source):
        ''' The complete deck: header, source cards, footer '''

        return self.header + list(source) + self.footer

    @classmethod
    def cobol(cls, program):
        ''' Compile with IGYCRCTL, link with IEWL and go '''

        header = [
            "//%s    JOB (ACCT),'COBOL COMPILE',CLASS=A,MSGCLASS=A" % program.upper(),
            "//             MSGLEVEL=(1,1),NOTIFY=&SYSUID",
            "//*",
            "//COMPILE  EXEC PGM=IGYCRCTL,REGION=0M",
            "//STEPLIB  DD DSNAME=IGY.V6R3M0.SIGYCOMP,DISP=SHR",
            "//SYSPRINT DD SYSOUT=*",
            "//SYSLIN   DD DSNAME=&&LOADSET,DISP=(MOD,PASS),",
            "//            UNIT=SYSDA,SPACE=(CYL,(1,1))",
        ]
        for n in range(1, 8):
            header.append("//SYSUT%d   DD UNIT=SYSDA,SPACE=(CYL,(1,1))" % n)
        header.append("//SYSIN    DD *")

        footer = [
            "/*",
            "//*",
            "//LKED     EXEC PGM=IEWL,PARM='LIST,XREF,LET',",
            "//             REGION=1024K",
            "//SYSLIB   DD DSNAME=CEE.SCEELKED,DISP=SHR",
            "//SYSLIN   DD DSNAME=&&LOADSET,DISP=(OLD,DELETE)",
            "//SYSLMOD  DD DSNAME=&&GOSET(GO),DISP=(NEW,PASS),",
            "//            UNIT=SYSDA,SPACE=(CYL,(1,1,1))",
            "//SYSUT1   DD UNIT=SYSDA,SPACE=(CYL,(1,1))",
            "//SYSPRINT DD SYSOUT=*",
            "//*",
            "//GO       EXEC PGM=*.LKED.SYSLMOD",
            "//STEPLIB  DD DSNAME=CEE.SCEERUN,DISP=SHR",
            "//SYSOUT   DD SYSOUT=*",
            "//SYSPRINT DD SYSOUT=*",
            "//SYSUDUMP DD SYSOUT=*",
            "//SYSIN    DD *",
            "//* INPUT DATA CARDS (IF ANY)",
            "/*",
            "//",
        ]
        return cls(header, footer)
