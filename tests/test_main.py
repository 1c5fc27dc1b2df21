import io

import pytest
from pypdf import PdfReader

from keypunch.__main__ import main, parse_args

@pytest.fixture()
def paths(tmp_path, template_png, source_lines):
    src = tmp_path / "hello.cbl"
    src.write_text("\n".join(source_lines) + "\n")
    return {
        "src": src,
        "pdf": tmp_path / "hello.pdf",
        "sheet": tmp_path / "hello.txt",
        "template": template_png,
    }

def argv(paths, *extra):
    return [
        "keypunch",
        "-i", str(paths["src"]),
        "-o", str(paths["pdf"]),
        "-t", str(paths["template"]),
        "-c", str(paths["sheet"]),
    ] + list(extra)

def test_defaults():
    args = parse_args(["keypunch", "-i", "x.cbl"])
    assert args.output == "output.pdf"
    assert args.template == "punchcard_template.png"
    assert args.coding_sheet == "coding_sheet.txt"
    assert not args.jcl
    assert not args.dump

def test_input_required():
    with pytest.raises(SystemExit):
        parse_args(["keypunch"])

def test_seven_cards(paths, capsys):
    assert main(argv(paths)) == 0
    reader = PdfReader(io.BytesIO(paths["pdf"].read_bytes()))
    assert len(reader.pages) == 3
    assert "Total Cards: 7" in paths["sheet"].read_text()
    out = capsys.readouterr().out
    assert "Validated 7 lines of COBOL code" in out
    assert "Total cards (COBOL only): 7" in out

def test_jcl(paths, capsys):
    assert main(argv(paths, "--jcl")) == 0
    out = capsys.readouterr().out
    assert "Program name detected: HELLO" in out
    sheet = paths["sheet"].read_text()
    assert "//HELLO    JOB" in sheet
    assert "PROGRAM-ID. HELLO." in sheet

def test_dump(paths, capsys):
    assert main(argv(paths, "-d")) == 0
    dumped = [i for i in capsys.readouterr().out.splitlines() if i.startswith("# ")]
    assert len(dumped) == 7 * 13

def test_line_too_long(paths, capsys):
    paths["src"].write_text("       MOVE A TO B.\n" + "X" * 81 + "\n")
    assert main(argv(paths)) == 1
    assert "Line 2 exceeds 80 columns" in capsys.readouterr().err
    assert not paths["pdf"].exists()
    assert not paths["sheet"].exists()

def test_bad_template(paths, capsys):
    paths["template"].write_bytes(b"not an image")
    assert main(argv(paths)) == 1
    assert "Cannot decode template" in capsys.readouterr().err
    assert not paths["pdf"].exists()

def test_missing_input(paths, capsys):
    paths["src"].unlink()
    assert main(argv(paths)) == 1
    assert capsys.readouterr().err.startswith("keypunch: ")

def test_empty_input(paths, capsys):
    paths["src"].write_text("")
    assert main(argv(paths)) == 1
    assert "No source lines" in capsys.readouterr().err
    assert not paths["pdf"].exists()

def test_unwritable_output(paths, capsys):
    paths["pdf"] = paths["src"].parent / "missing" / "out.pdf"
    assert main(argv(paths)) == 1
    assert "Cannot write" in capsys.readouterr().err

def test_unwritable_coding_sheet_leaves_no_pdf(paths, capsys):
    paths["sheet"] = paths["src"].parent / "missing" / "hello.txt"
    assert main(argv(paths)) == 1
    assert "Cannot write" in capsys.readouterr().err
    assert not paths["pdf"].exists()
