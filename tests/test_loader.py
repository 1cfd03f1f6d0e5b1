from strmap.loader import LoadError, LoadOk, load, load_file
from strmap.table import NotFound, create


def test_load():
    m = create()
    source = """
        # connection
        host = example.com
        port=22

        ! Xresources style
        URxvt.font: xft:Mono:size=10
        empty =
    """

    assert load(m, source) == LoadOk(4)
    assert m.get("host") == "example.com"
    assert m.get("port") == "22"
    assert m.get("URxvt.font") == "xft:Mono:size=10"
    assert m.get("empty") == ""
    assert m.get("# connection") == NotFound()


def test_first_separator_wins():
    m = create()
    assert load(m, "url = http://example.com\nratio: a=b\n") == LoadOk(2)

    assert m.get("url") == "http://example.com"
    assert m.get("ratio") == "a=b"


def test_override_order():
    m = create()
    assert load(m, "host = example.com\nport = 22\n") == LoadOk(2)
    assert load(m, "host: example.org\n") == LoadOk(1)

    assert m.get("host") == "example.org"
    assert m.get("port") == "22"
    assert m.count == 2


def test_load_errors():
    m = create()
    result = load(m, "a = 1\n\nno separator here\nb = 2\n")

    assert isinstance(result, LoadError)
    assert result.line == 3
    assert m.get("a") == "1"
    assert m.get("b") == NotFound()

    assert load(create(), "ok = 1\n = value\n") == LoadError(2, "Expect key before separator.")


def test_load_file(tmp_path):
    path = tmp_path / "app.conf"
    path.write_text("user = root\nshell = /bin/sh\n", encoding="utf-8")

    m = create()
    assert load_file(m, str(path)) == LoadOk(2)
    assert m.get("shell") == "/bin/sh"


def test_only_newlines_end_lines():
    m = create()
    assert load(m, "a = x\x0cy\r\nb = 1  2\n") == LoadOk(2)

    assert m.get("a") == "x\x0cy"
    assert m.get("b") == "1  2"

    result = load(create(), "a = x\x0cy\nbad\n")
    assert isinstance(result, LoadError)
    assert result.line == 2


def test_load_file_with_bom(tmp_path):
    path = tmp_path / "bom.conf"
    path.write_bytes(b"\xef\xbb\xbfhost = example.com\n")

    m = create()
    assert load_file(m, str(path)) == LoadOk(1)
    assert m.get("host") == "example.com"
