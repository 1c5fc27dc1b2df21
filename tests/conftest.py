'''
   Shared fixtures
'''

import imageio
import numpy
import pytest

# Big enough for all 80x12 holes: 30+79*9+7 = 748, 25+11*27+15 = 337
TEMPLATE_WIDTH = 760
TEMPLATE_HEIGHT = 350

@pytest.fixture()
def template():
    im = numpy.full((TEMPLATE_HEIGHT, TEMPLATE_WIDTH, 3), 230, dtype=numpy.uint8)
    im[:, :, 2] = 180
    return im

@pytest.fixture()
def template_png(tmp_path, template):
    path = tmp_path / "punchcard_template.png"
    imageio.v3.imwrite(path, template)
    return path

@pytest.fixture()
def source_lines():
    return [
        "       IDENTIFICATION DIVISION.",
        "       PROGRAM-ID. HELLO.",
        "       PROCEDURE DIVISION.",
        "           DISPLAY 'HELLO, WORLD'.",
        "           MOVE 1 TO COUNTER.",
        "           ADD 2 TO COUNTER GIVING TOTAL.",
        "           STOP RUN.",
    ]
