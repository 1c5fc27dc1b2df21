from keypunch.codingsheet import coding_sheet

def test_rows(source_lines):
    sheet = coding_sheet(source_lines).splitlines()
    rows = sheet[6:6 + len(source_lines)]
    assert rows[0].startswith("000001     IDENTIFICATION DIVISION.")
    assert rows[0].endswith("  00000001")
    assert rows[-1].endswith("  00000007")
    assert all(len(r) == 6 + 2 + 1 + 2 + 65 + 2 + 8 for r in rows)

def test_header_and_footer():
    sheet = coding_sheet(["A", "B"])
    lines = sheet.splitlines()
    assert lines[0] == "=" * 80
    assert lines[1].strip() == "COBOL CODING SHEET"
    assert lines[-2] == "Total Cards: 2"
    assert sheet.endswith("=" * 80 + "\n")

def test_long_code_cut_like_the_card():
    sheet = coding_sheet(["Z" * 80]).splitlines()
    assert "Z" * 65 + "  00000001" in sheet[6]
    assert "Z" * 66 not in sheet[6]
