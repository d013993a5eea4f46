import logging
from flask import Flask
from todo_server import create_app
from todo_server import __main__ as entry
from todo_server.config import Config


def test_defaults():
    app = create_app({"TESTING": True})
    assert app.config["PORT"] == Config.PORT
    assert app.config["DATA_FILE"].endswith("todos.json")


def test_store_is_injected(tmp_path):
    data_file = str(tmp_path / "todos.json")
    app = create_app({"DATA_FILE": data_file, "TESTING": True})
    assert app.extensions["store"].data_file == data_file


def test_main_runs_on_configured_port(monkeypatch, tmp_path, caplog):
    calls = {}

    def fake_run(self, host=None, port=None, debug=None, **kw):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setattr(Config, "PORT", 4321)
    monkeypatch.setattr(Config, "DEBUG", False)
    monkeypatch.setattr(Config, "DATA_FILE", str(tmp_path / "todos.json"))
    monkeypatch.setattr(Flask, "run", fake_run)
    with caplog.at_level(logging.INFO, logger="todo_server"):
        entry.main()

    assert calls == {"host": "0.0.0.0", "port": 4321, "debug": False}
    assert "TodoServer is running on port 4321" in caplog.text


def test_log_level_from_test_config(tmp_path):
    create_app({"DATA_FILE": str(tmp_path / "todos.json"), "LOG_LEVEL": "DEBUG", "TESTING": True})
    assert logging.getLogger("todo_server").level == logging.DEBUG

    create_app({"DATA_FILE": str(tmp_path / "todos.json"), "LOG_LEVEL": "warning", "TESTING": True})
    assert logging.getLogger("todo_server").level == logging.WARNING
