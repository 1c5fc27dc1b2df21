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
   Cards to PDF
   ------------

   The template image goes into the PDF exactly once, and every card
   on every page refers to that one copy.  The holes are drawn on top
   of it as filled black rectangles.

   DocumentBuilder is the only thing which talks to reportlab.  Pages
   are described as PageContent, a list of drawing operations, so the
   object graph (image, content streams, pages, page tree, catalog)
   never has to be wired up by hand, and a page can only refer to an
   image which has already been added to the same document.
'''

import io
from collections import namedtuple

import imageio
import numpy
from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from .errors import OutputWriteError, TemplateDecodeError
from .geometry import CardGeometry

# Draw `resource` into the unit square transformed by `matrix`
PlaceImage = namedtuple("PlaceImage", "resource matrix")

# Fill `rect` with black
FillRect = namedtuple("FillRect", "rect")

class ImageResource():

    ''' An RGB image embedded in a DocumentBuilder '''

    def __init__(self, owner, pixels):
        self.owner = owner
        self.height, self.width = pixels.shape[:2]
        self.reader = ImageReader(Image.fromarray(pixels))

    def __repr__(self):
        return "<ImageResource %dx%d>" % (self.width, self.height)

class PageContent():

    ''' The drawing operations of one page, in order '''

    def __init__(self):
        self.ops = []

    def __iter__(self):
        return iter(self.ops)

    def __len__(self):
        return len(self.ops)

    def place_image(self, resource, matrix):
        self.ops.append(PlaceImage(resource, tuple(matrix)))

    def fill_rect(self, rect):
        self.ops.append(FillRect(rect))

    def resources(self):
        ''' The images this page uses, each once '''

        result = []
        for op in self.ops:
            if isinstance(op, PlaceImage) and op.resource not in result:
                result.append(op.resource)
        return result

class DocumentBuilder():

    '''
       A PDF, one page at a time
       ~~~~~~~~~~~~~~~~~~~~~~~~~

       add_image_resource() any number of times, add_page() at least
       once, then finish() exactly once to get the bytes.
    '''

    # Uncompressed page content, and no timestamps, so the same deck
    # always comes out byte for byte the same.
    PAGE_COMPRESSION = 0
    INVARIANT = 1

    def __init__(self, page_size):
        self.page_size = tuple(page_size)
        self.pages = 0
        self.finished = False
        self.buf = io.BytesIO()
        self.canvas = canvas.Canvas(
            self.buf,
            pagesize=self.page_size,
            pageCompression=self.PAGE_COMPRESSION,
            invariant=self.INVARIANT,
        )

    def check_open(self):
        if self.finished:
            raise ValueError("Document already finished")

    def add_image_resource(self, pixels):
        ''' Embed an (height, width, 3) uint8 array '''

        self.check_open()
        pixels = numpy.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] != 3 or pixels.dtype != numpy.uint8:
            raise ValueError(
                "Need 8-bit RGB pixels, got %s %s" % (pixels.dtype, pixels.shape)
            )
        return ImageResource(self, pixels)

    def add_page(self, content):
        ''' Append a page drawn by `content` '''

        self.check_open()
        for op in content:
            if not isinstance(op, (PlaceImage, FillRect)):
                raise TypeError("Unknown drawing operation %r" % (op,))
        for resource in content.resources():
            if resource.owner is not self:
                raise ValueError("%r belongs to another document" % resource)

        c = self.canvas
        c.setFillColorRGB(0, 0, 0)
        for op in content:
            if isinstance(op, PlaceImage):
                c.saveState()
                c.transform(*op.matrix)
                c.drawImage(op.resource.reader, 0, 0, width=1, height=1)
                c.restoreState()
            else:
                c.rect(*op.rect, stroke=0, fill=1)
        c.showPage()
        self.pages += 1

    def finish(self):
        ''' Close the document and return the PDF '''

        self.check_open()
        if not self.pages:
            raise ValueError("Document has no pages")
        self.canvas.save()
        self.finished = True
        return self.buf.getvalue()

def paginate(cards, per_page):
    ''' Split the deck into pages, the last one possibly short '''

    cards = list(cards)
    return [cards[i:i + per_page] for i in range(0, len(cards), per_page)]

def layout_page(cards, template, geometry):
    ''' Template plus holes for each card, top slot first '''

    content = PageContent()
    for slot, card in enumerate(cards):
        content.place_image(template, geometry.template_placement(slot))
        for col, row in card.punches():
            content.fill_rect(geometry.punch_rect(slot, col, row))
    return content

def render_deck(cards, template, geometry_class=CardGeometry):
    ''' PDF bytes for a deck of PunchedCards on a template image '''

    height, width = template.shape[:2]
    geometry = geometry_class(width, height)
    builder = DocumentBuilder(geometry.page_size)
    image = builder.add_image_resource(template)
    for page in paginate(cards, geometry.CARDS_PER_PAGE):
        builder.add_page(layout_page(page, image, geometry))
    return builder.finish()

def load_template(path):
    ''' Read the template image as (height, width, 3) uint8 RGB '''

    try:
        im = imageio.v3.imread(path)
    except (OSError, ValueError) as err:
        raise TemplateDecodeError(path, err) from err

    if im.ndim == 3 and im.shape[2] in (1, 2):
        # grey, maybe with alpha
        im = im[:, :, 0]
    if im.ndim == 2:
        im = numpy.stack((im, im, im), axis=-1)
    elif im.ndim == 3 and im.shape[2] in (3, 4):
        im = im[:, :, :3]
    else:
        raise TemplateDecodeError(path, "unexpected image shape %s" % (im.shape,))

    if im.dtype != numpy.uint8:
        raise TemplateDecodeError(path, "need 8 bits per sample, not %s" % im.dtype)
    return numpy.ascontiguousarray(im)

def write_document(path, data):
    ''' Write bytes to `path`, all of them or complain '''

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as err:
        raise OutputWriteError(path, err) from err
