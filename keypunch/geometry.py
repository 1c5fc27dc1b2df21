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
   Where things go on the page
   ---------------------------

   Three coordinate systems meet here:

      * The template image, in pixels, origin top-left, Y down.
      * The physical card, in millimeters.
      * The PDF page, in points, origin bottom-left, Y up.

   The template is stretched to the physical size of a card, so its
   pixels are not square on the page and X and Y scale separately.

   Cards are centered left-right, and stacked CARDS_PER_PAGE to the
   page with equal gaps above, between and below them.  Slot zero is
   the card at the top of the page.
'''

from collections import namedtuple

Rect = namedtuple("Rect", "x y width height")

class CardGeometry():

    '''
       Template pixels to page points
       ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

       Nothing here changes after construction.
    '''

    # IBM card, per FIPS-13, in mm
    CARD_WIDTH = 187.325
    CARD_HEIGHT = 82.55

    # A4, in mm
    PAGE_WIDTH = 210.0
    PAGE_HEIGHT = 297.0

    CARDS_PER_PAGE = 3

    PT_PER_MM = 2.834645

    # Hole positions in the template image, in pixels.
    # Measured on punchcard_template.png, not a variable unless
    # somebody draws a new template.
    FIRST_PUNCH_X = 30
    FIRST_PUNCH_Y = 25
    COLUMN_SPACING = 9
    ROW_SPACING = 27
    PUNCH_WIDTH = 7
    PUNCH_HEIGHT = 15

    def __init__(self, template_width, template_height):
        if template_width <= 0 or template_height <= 0:
            raise ValueError(
                "Bad template size %r x %r" % (template_width, template_height)
            )
        self.template_width = template_width
        self.template_height = template_height

        pt = self.PT_PER_MM
        n = self.CARDS_PER_PAGE
        self.page_width = self.PAGE_WIDTH * pt
        self.page_height = self.PAGE_HEIGHT * pt
        self.card_width = self.CARD_WIDTH * pt
        self.card_height = self.CARD_HEIGHT * pt
        self.margin = (self.PAGE_WIDTH - self.CARD_WIDTH) / 2 * pt
        self.spacing = (self.PAGE_HEIGHT - n * self.CARD_HEIGHT) / (n + 1) * pt

        self.scale_x = self.card_width / template_width
        self.scale_y = self.card_height / template_height
        self.punch_width = self.PUNCH_WIDTH * self.scale_x
        self.punch_height = self.PUNCH_HEIGHT * self.scale_y

    @property
    def page_size(self):
        return (self.page_width, self.page_height)

    def check_slot(self, slot):
        if not 0 <= slot < self.CARDS_PER_PAGE:
            raise ValueError("No slot %r on a page of %d cards" % (slot, self.CARDS_PER_PAGE))

    def card_bottom(self, slot):
        ''' Y of the lower edge of the card in `slot` '''

        self.check_slot(slot)
        return (
            self.page_height
            - self.spacing
            - (slot + 1) * self.card_height
            - slot * self.spacing
        )

    def template_placement(self, slot):
        '''
           The (a, b, c, d, e, f) matrix which maps the unit square
           of the template image onto the card in `slot`
        '''

        return (self.card_width, 0.0, 0.0, self.card_height, self.margin, self.card_bottom(slot))

    def punch_pixel(self, col, row):
        ''' Top-left template pixel of a hole, both 0-based '''

        return (
            self.FIRST_PUNCH_X + col * self.COLUMN_SPACING,
            self.FIRST_PUNCH_Y + row * self.ROW_SPACING,
        )

    def pixel_rect(self, slot, px, py):
        ''' Page rectangle of a hole whose top-left is at template (px, py) '''

        x = self.margin + px * self.scale_x
        # Flip: template Y grows down, page Y grows up
        y = self.card_bottom(slot) + (self.template_height - py) * self.scale_y - self.punch_height
        return Rect(x, y, self.punch_width, self.punch_height)

    def punch_rect(self, slot, col, row):
        ''' Page rectangle of the hole at (col, row) of the card in `slot` '''

        return self.pixel_rect(slot, *self.punch_pixel(col, row))
