import json

from browser_model.__main__ import main


def test_main_requires_addresses(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err


def test_main_prints_state(monkeypatch, capsys):
    monkeypatch.setenv("BROWSER_RESOLVER", "offline")
    monkeypatch.delenv("BROWSER_DEFAULT_SCHEME", raising=False)
    monkeypatch.delenv("BROWSER_KNOWN_SCHEMES", raising=False)

    assert main(["example.com", "docs", "bad address"]) == 1

    out, err = capsys.readouterr()
    assert "example.com -> http://example.com" in out
    assert "bad address" in err
    state = json.loads(out[out.index("{"):])
    assert state["history"] == ["http://example.com", "http://example.com/docs"]
    assert state["cursor"] == 1
