import pytest

from quoting import NULL_SENTINEL, csv_format, quote_sql_identifier, quote_sql_literal


@pytest.mark.parametrize("value", [b"plain", b"O'Brien", b"with space", "žluť".encode("utf-8")])
def test_csv_format_returns_input_when_nothing_to_quote(value):
    quoted = csv_format(value)
    assert quoted.value is value
    assert quoted.borrowed is True


@pytest.mark.parametrize(
    "value, expected",
    [
        (b'say "hi"', b'"say ""hi"""'),
        (b"a,b", b'"a,b"'),
        (b"a\tb", b'"a\tb"'),
        (b"a\rb", b'"a\rb"'),
        (b"a\nb", b'"a\nb"'),
        ('ž"'.encode("utf-8"), b'"\xc5\xbe"""'),
    ],
)
def test_csv_format_wraps_and_doubles_quotes(value, expected):
    quoted = csv_format(value)
    assert quoted.value == expected
    assert quoted.borrowed is False


def test_csv_format_empty_value():
    assert csv_format(b"", empty_string_is_null=True).is_null
    assert csv_format(b"", empty_string_is_null=False).value == b'""'


def test_csv_format_null_sentinel_only_outside_8bit_mode():
    assert csv_format(NULL_SENTINEL).is_null
    raw = csv_format(NULL_SENTINEL, force8bit=True)
    assert raw.value is NULL_SENTINEL


def test_csv_format_accepts_memoryview_slices():
    row = memoryview(b"xx a,b xx")
    quoted = csv_format(row[3:6])
    assert quoted.value == b'"a,b"'


@pytest.mark.parametrize("value", [b"abc_1", b"id", b"", b'"Quoted"'])
def test_quote_sql_identifier_passes_through(value):
    quoted = quote_sql_identifier(value)
    assert quoted.value is value


@pytest.mark.parametrize(
    "value, expected",
    [
        (b"Abc", b'"Abc"'),
        (b"a b", b'"a b"'),
        (b"1abc", b'"1abc"'),
        (b'a"b', b'"a""b"'),
        ("jméno".encode("utf-8"), '"jméno"'.encode("utf-8")),
    ],
)
def test_quote_sql_identifier_quotes(value, expected):
    assert quote_sql_identifier(value).value == expected


@pytest.mark.parametrize("value", [b"123.45", b"42", b".5", b"NULL", b"null"])
def test_quote_sql_literal_passes_through(value):
    quoted = quote_sql_literal(value)
    assert quoted.value is value


@pytest.mark.parametrize(
    "value, expected",
    [
        (b"12.3.4", b"'12.3.4'"),
        (b"abc", b"'abc'"),
        (b"a'b", b"'a''b'"),
        (b"Null", b"'Null'"),
        (b"-1", b"'-1'"),
        (b"1e5", b"'1e5'"),
        ("kůň".encode("utf-8"), "'kůň'".encode("utf-8")),
    ],
)
def test_quote_sql_literal_quotes(value, expected):
    assert quote_sql_literal(value).value == expected


def test_quote_sql_literal_empty_and_null_sentinel():
    assert quote_sql_literal(b"").value == b"''"
    assert quote_sql_literal(b"", empty_string_is_null=True).value == b"NULL"
    assert quote_sql_literal(NULL_SENTINEL).value == b"NULL"
    assert quote_sql_literal(NULL_SENTINEL, force8bit=True).value == b"'" + NULL_SENTINEL + b"'"
