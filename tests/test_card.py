import pytest

from keypunch import card
from keypunch.card import PunchedCard, format_record, split_fields, validate_lines
from keypunch.errors import InputTooLong, KeypunchError

def test_display_record():
    record = format_record("DISPLAY 'HI'.", 1)
    assert len(record) == 80
    assert record[:6] == "000001"
    assert record[6] == ' '
    assert record[7:20] == "DISPLAY 'HI'."
    assert record[20:72] == ' ' * 52
    assert record[72:] == "00000001"

@pytest.mark.parametrize("n", [1, 7, 999999, 1000000, 1234567, 99999999])
def test_sequence_fields(n):
    record = format_record("X", n)
    assert len(record) == 80
    assert record[:6] == "%06d" % (n % 1000000)
    assert record[72:] == "%08d" % n

def test_empty_line():
    record = format_record("", 3)
    assert record == "000003" + ' ' * 66 + "00000003"

def test_long_code_truncated():
    record = format_record("X" * 79, 2)
    assert len(record) == 80
    assert record[7:72] == "X" * 65
    assert record[72:] == "00000002"

def test_preformatted():
    assert split_fields("       MOVE A TO B.   ") == (' ', "MOVE A TO B.")
    assert split_fields("            ADD 1 TO X.") == (' ', "     ADD 1 TO X.")

def test_not_preformatted():
    assert split_fields("  MOVE A TO B.  ") == (' ', "MOVE A TO B.")
    # Six blanks and an indicator is not seven blanks
    assert split_fields("      * COMMENT") == (' ', "* COMMENT")
    # Seven blanks and nothing else
    assert split_fields("       ") == (' ', "")

def test_reformat_round_trip():
    record = format_record("DISPLAY 'HI'.", 42)
    again = format_record(' ' * 6 + record[6:72], 42)
    assert again == record

def test_card_columns():
    c = PunchedCard.from_line("DISPLAY 'HI'.", 1)
    assert len(c.columns) == 80
    assert c.columns[0] == (2,)            # '0'
    assert c.columns[5] == (3,)            # '1'
    assert c.columns[6] == ()              # indicator
    assert c.columns[7] == (0, 6)          # 'D'
    assert c.columns[15] == (0, 10)        # "'"
    assert c.columns[19] == (0, 1, 10)     # '.'
    assert all(rows == () for rows in c.columns[20:72])

def test_punches_in_column_then_row_order():
    c = PunchedCard.from_line("A.", 1)
    holes = list(c.punches())
    assert holes == sorted(holes)
    assert (7, 0) in holes and (7, 3) in holes
    assert [h for h in holes if h[0] == 8] == [(8, 0), (8, 1), (8, 10)]

def test_lowercase_punches_as_uppercase():
    assert PunchedCard.from_line("move a", 1).columns == PunchedCard.from_line("MOVE A", 1).columns

def test_one_column_per_character():
    c = PunchedCard.from_line("stra\u00dfe", 1)
    assert len(c.columns) == 80
    assert c.record[11] == "\u00df"
    assert c.columns[11] == (2, 4)
    assert c.columns[12] == (0, 7)

def test_dump():
    c = PunchedCard.from_line("A", 1)
    lines = list(c.dump())
    assert lines[0] == c.record
    assert len(lines) == 13
    assert all(len(i) == 80 for i in lines[1:])
    assert lines[1][7] == '#'       # 12 zone of 'A'
    assert lines[4][7] == '#'       # 1 row of 'A'
    assert lines[2][7] == '-'

def test_punch_deck_numbers_from_one():
    deck = card.punch_deck(["A", "B", "C"])
    assert [c.record[72:] for c in deck] == ["00000001", "00000002", "00000003"]

def test_validate_trims():
    assert validate_lines(["A   \n", "", "   B\t"]) == ["A", "", "   B"]

def test_validate_exactly_80():
    assert validate_lines(["X" * 80 + "   "]) == ["X" * 80]

def test_validate_too_long():
    with pytest.raises(InputTooLong) as exc:
        validate_lines(["OK", "Y" * 81])
    assert exc.value.lineno == 2
    assert exc.value.length == 81
    assert exc.value.preview == "Y" * 40
    assert "Line 2 exceeds 80 columns (81 chars)" in str(exc.value)
    assert isinstance(exc.value, KeypunchError)
