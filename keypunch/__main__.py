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
   main function for command line use
   ==================================
'''

import argparse
import os
import sys

from . import card
from . import pdf
from .codingsheet import coding_sheet
from .errors import KeypunchError
from .jobdeck import JobDeck, program_name

def parse_args(argv):
    ''' Expects sys.argv, program name included '''

    parser = argparse.ArgumentParser(
        prog="keypunch",
        description="Punch COBOL source onto punched card images in a PDF",
    )
    parser.add_argument("-i", "--input", required=True,
                        help="COBOL source file to process")
    parser.add_argument("-o", "--output", default="output.pdf",
                        help="output PDF file")
    parser.add_argument("-t", "--template", default="punchcard_template.png",
                        help="punched card template image")
    parser.add_argument("-c", "--coding-sheet", default="coding_sheet.txt",
                        help="coding sheet text output file")
    parser.add_argument("-j", "--jcl", action="store_true",
                        help="wrap the source in JCL to compile and run it")
    parser.add_argument("-d", "--dump", action="store_true",
                        help="print the hole pattern of every card")
    return parser.parse_args(argv[1:])

def read_source(path):
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()

def run(args):
    ''' Source file in, PDF and coding sheet out '''

    print("COBOL to Punch Card PDF Generator")
    print("==================================")
    print("Input file:      " + args.input)
    print("Output PDF:      " + args.output)
    print("Coding sheet:    " + args.coding_sheet)
    print("Include JCL:     " + ("Yes" if args.jcl else "No"))
    print()

    source = card.validate_lines(read_source(args.input))
    print("Validated %d lines of COBOL code" % len(source))

    if args.jcl:
        name = program_name(source)
        print("Program name detected: " + name)
        lines = JobDeck.cobol(name).wrap(source)
        print("Total cards (with JCL): %d" % len(lines))
    else:
        lines = source
        print("Total cards (COBOL only): %d" % len(lines))

    if not lines:
        raise KeypunchError("No source lines in " + args.input)

    template = pdf.load_template(args.template)
    deck = card.punch_deck(lines)

    if args.dump:
        for c in deck:
            for i in c.dump():
                print("# " + i)

    document = pdf.render_deck(deck, template)
    sheet = coding_sheet(lines).encode("utf-8")

    pdf.write_document(args.output, document)
    try:
        pdf.write_document(args.coding_sheet, sheet)
    except KeypunchError:
        # Both or neither
        os.remove(args.output)
        raise

    print()
    print("Punch cards generated successfully!")
    print("  PDF:           " + args.output)
    print("  Coding sheet:  " + args.coding_sheet)

def main(argv):
    args = parse_args(argv)
    try:
        run(args)
    except (KeypunchError, OSError, UnicodeDecodeError) as err:
        print("keypunch: %s" % err, file=sys.stderr)
        return 1
    return 0

def cli():
    sys.exit(main(sys.argv))

if __name__ == "__main__":
    cli()
