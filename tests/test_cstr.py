import pytest

from strkit.cstr import (
    strcat,
    strchr,
    strcmp,
    strcpy,
    strcspn,
    strlen,
    strncat,
    strncmp,
    strncpy,
    strpbrk,
    strrchr,
    strspn,
    strstr,
    strtok,
)


def _cview(text: str) -> str:
    return text.split("\0", 1)[0]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world\0", 11),
        ("Hello world\n\0", 12),
        ("a\n\0", 2),
        (" \n\0", 2),
        (" \0", 1),
        ("\n\0", 1),
        ("\0", 0),
    ],
)
def test_strlen(text, expected):
    assert strlen(text) == expected


@pytest.mark.parametrize(
    "dest, src, expected",
    [
        ("hello world", "\n", "hello world\n"),
        ("Hello world\n\0", "\0", "Hello world\n"),
        ("hello", " world", "hello world"),
        (" \n\0", " ", " \n "),
        ("a\n\0", "a", "a\na"),
    ],
)
def test_strcat(dest, src, expected):
    assert strcat(dest, src) == expected


@pytest.mark.parametrize(
    "dest, src, n, expected",
    [
        ("1234\x01n5123", "1\nn3", 5, "1234\x01n51231\nn3"),
        ("ej n\0fg4wsf", "Su\0lt", 4, "ej nSu"),
        ("hel\0lo\0", "l\0o", 2, "hell"),
        (" \n\0", "726\0", 5, " \n726"),
        ("Hello\0world", "WO\0RLD", 5, "HelloWO"),
    ],
)
def test_strncat(dest, src, n, expected):
    assert _cview(strncat(dest, src, n)) == expected


def test_strncat_keeps_rest_of_buffer():
    assert strncat("Hello\0world", "WO\0RLD", 5) == "HelloWO\0rld"
    assert strncat("ej n\0fg4wsf", "Su\0lt", 4) == "ej nSu\x004wsf"


def test_strncat_negative_count():
    with pytest.raises(ValueError):
        strncat("a", "b", -1)


@pytest.mark.parametrize(
    "text, c, expected",
    [
        ("1235123", "4", None),
        ("Hello World", "o", 4),
        ("Hel,lo\nWorld", "e", 1),
        ("He\0ll\0o", "l", None),
        ("He,l/l.o\0world", "l", 3),
    ],
)
def test_strchr(text, c, expected):
    assert strchr(text, c) == expected


def test_strchr_terminator_and_int():
    assert strchr("abc", "\0") == 3
    assert strchr("abc", ord("c")) == 2


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize(
    "dest, src, expected",
    [
        ("Hello world\0", " Sult", " Sult"),
        ("a\n\0", "AAA\0aaa", "AAA"),
        ("Hel,lo\nWorld", "a\n\0", "a\n"),
        ("Hel", "lo\0world", "lo"),
        ("\0", "\n\0", "\n"),
    ],
)
def test_strcpy(dest, src, expected):
    assert _cview(strcpy(dest, src)) == expected


def test_strcpy_keeps_rest_of_buffer():
    assert strcpy("Hel,lo\nWorld", "a\n\0") == "a\n\0,lo\nWorld"
    assert strcpy("Hel", "lo\0world") == "lo"


@pytest.mark.parametrize(
    "src, n, expected",
    [
        ("hello world\0", 6, "hello "),
        ("hello world\n\0", 6, "hello "),
        ("a\n\0", 6, "a\n"),
        (" \n\0", 6, " \n"),
        (" \0", 1, " "),
        ("\n\0", 1, "\n"),
        ("\0", 1, ""),
    ],
)
def test_strncpy(src, n, expected):
    assert strncpy("", src, n) == expected


def test_strncpy_terminates_inside_buffer():
    assert strncpy("abcdefgh", "xyz", 2) == "xy\0defgh"


@pytest.mark.parametrize(
    "text, c, expected",
    [
        ("12345123", "1", 5),
        ("ej n\0fg4wsf", "g", None),
        ("hlello", "l", 4),
        ("wor \0ld", " ", 3),
        ("f\n\0", "f", 0),
    ],
)
def test_strrchr(text, c, expected):
    assert strrchr(text, c) == expected


@pytest.mark.parametrize(
    "text, accept, expected",
    [
        ("12345123", "123", 0),
        ("ej n\0fg4wsf", "gf", None),
        ("hello", "ehl", 0),
        ("wor ld", " ", 3),
        ("f\n\0", "ff", 0),
    ],
)
def test_strpbrk(text, accept, expected):
    assert strpbrk(text, accept) == expected


@pytest.mark.parametrize(
    "text, delim, expected",
    [
        ("123/45123", "/", "123"),
        ("ej n\0fg4wsf", " ", "ej"),
        ("Hel,lo\nWorld", ",", "Hel"),
        ("Hello", "/", "Hello"),
        ("He,l/l.o\0world", ",/.", "He"),
        ("\0He,l/l.o\0world", ",/.", None),
        ("He.l/l..o\0world", ",/.", "He"),
        ("\0", "/.\n", None),
    ],
)
def test_strtok_first_token(text, delim, expected):
    assert next(strtok(text, delim), None) == expected


def test_strtok_all_tokens():
    assert list(strtok("He.l/l..o\0world", ",/.")) == ["He", "l", "l", "o"]
    assert list(strtok("//a//b/", "/")) == ["a", "b"]


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("1234567890", "1234567890", 0),
        ("1234567890", "1234507890", 6),
        ("1234567890", "123456\n7890", 45),
        ("1234567890", "123456\0\n7890", 55),
        ("hello", "hello", 0),
        ("hello", "\nhello", 94),
        ("hello", "\0hello", 104),
    ],
)
def test_strcmp(first, second, expected):
    assert strcmp(first, second) == expected


def test_strcmp_shorter_first_is_negative():
    assert strcmp("ab", "abc") == -99


@pytest.mark.parametrize(
    "first, second, n, expected",
    [
        ("", "", 0, 0),
        ("floppa", "", 0, 0),
        ("", "floppa", 0, 0),
        ("floppa", "floppa", 6, 0),
        ("floppabazbazkotya", "floppabaz", 10, 98),
        ("floppa", "floppa", 1, 0),
    ],
)
def test_strncmp(first, second, n, expected):
    assert strncmp(first, second, n) == expected


def test_strncmp_stops_at_terminator():
    assert strncmp("abc\0x", "abc\0y", 10) == 0


@pytest.mark.parametrize(
    "text, reject, expected",
    [
        ("1234567890", "0000", 9),
        ("1234567890", "23", 1),
        ("hello", "000", 5),
        ("hello world", "36347\0", 11),
        ("hello world", "36347\n", 11),
        ("hello3world", "\n36347\0", 5),
    ],
)
def test_strcspn(text, reject, expected):
    assert strcspn(text, reject) == expected


@pytest.mark.parametrize(
    "text, accept, expected",
    [
        ("", "", 0),
        ("", "gora", 0),
        ("gora", "", 0),
        ("gOra", "gora", 1),
        ("123", "123", 3),
        ("123", "12345", 3),
        ("12345", "123", 3),
        ("0987654321", "1234567890", 10),
        ("123", "1A2A3A4A5A", 3),
        ("123", "a1aaa23aaa41235", 3),
        ("aD", "absD", 2),
        ("0987654321", "32ASDASDPare[0g9jf m07y271234567890", 10),
        ("1234567890QWERTYUIOPASDFGHJKLZXCVBNM",
         "32ASDASDPare[0g9jf m07y271234567890", 10),
        ("1234567890qwertyuiopasdfghjklczxcvbnm",
         "32jersASDASDPare[0g9jf m07y271234567890", 10),
        ("1" * 85 + "3", "3" * 86, 0),
    ],
)
def test_strspn(text, accept, expected):
    assert strspn(text, accept) == expected


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        ("", "", 0),
        ("", "jho1faQsdkjnSa3aefwf8hiuJafeHioj", None),
        ("safQhilufas7MaSef2345wknwefnkjHawe2fhilu", "", 0),
        ("You are toxic!", "toxic", 8),
        ("There is no right word in this test!", "NOT", None),
        ("AbOBosNyTSa", "aBoboSNYTsa", None),
        ("AD AD AD", "AD", 0),
        ("22 321 123", "123", 7),
        ("1", "1", 0),
        ("13625523478437263475984675342345sdghyftrg freshtsyASFWEt wEafe", " ", 41),
        ("-", "1234567890qwertyuiopasdfghjk-", None),
    ],
)
def test_strstr(haystack, needle, expected):
    assert strstr(haystack, needle) == expected