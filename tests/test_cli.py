from ontax.config import get_settings
from ontax.main import main


def test_cli_prints_selected_field(capsys):
    get_settings.cache_clear()
    assert main(["113000", "--field", "federal_tax"]) == 0
    assert capsys.readouterr().out.strip() == "19220.50"


def test_cli_all_fields(capsys):
    assert main(["0", "--all"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert "total_tax: 0.00" in lines
    assert "tax_rate: n/a" in lines


def test_cli_reports_errors(capsys):
    assert main(["-5"]) == 2
    assert "cannot be negative" in capsys.readouterr().err
    assert main(["1000", "--field", "bogus"]) == 2
    assert "Unknown breakdown field" in capsys.readouterr().err


def test_cli_rejects_income_above_maximum(capsys):
    assert main(["1e30"]) == 2
    assert "supported maximum" in capsys.readouterr().err


def test_cli_serve_forwards_host_and_port(monkeypatch):
    import uvicorn

    from ontax.main import app

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))
    assert main(["serve", "--host", "0.0.0.0", "--port", "9001"]) == 0
    assert calls == [(app, {"host": "0.0.0.0", "port": 9001})]


def test_cli_serve_defaults(monkeypatch):
    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append(kwargs))
    assert main(["serve"]) == 0
    assert calls == [{"host": "127.0.0.1", "port": 8000}]
