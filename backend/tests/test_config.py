import json

from envelope.config import DEFAULT_BUDGET, load_budget_metadata, load_settings


def test_missing_budget_file_uses_defaults(tmp_path):
    assert load_budget_metadata(tmp_path / "budget.json") == DEFAULT_BUDGET


def test_budget_file_is_loaded(tmp_path):
    path = tmp_path / "budget.json"
    path.write_text(json.dumps({
        "name": "Household",
        "currency": {"code": "EUR", "precision": 2},
        "version": 1,
    }))

    metadata = load_budget_metadata(path)

    assert metadata.name == "Household"
    assert metadata.currency.code == "EUR"


def test_corrupt_budget_file_uses_defaults(tmp_path):
    path = tmp_path / "budget.json"
    path.write_text("{not json")
    assert load_budget_metadata(path) == DEFAULT_BUDGET


def test_invalid_budget_file_uses_defaults(tmp_path):
    path = tmp_path / "budget.json"
    path.write_text(json.dumps({"name": "X", "currency": {"code": "", "precision": -1}}))
    assert load_budget_metadata(path) == DEFAULT_BUDGET

    path.write_text(json.dumps(["not", "an", "object"]))
    assert load_budget_metadata(path) == DEFAULT_BUDGET


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ENVELOPE_HOST", "0.0.0.0")
    monkeypatch.setenv("ENVELOPE_PORT", "9000")
    monkeypatch.setenv("ENVELOPE_STORAGE", "memory")

    settings = load_settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.storage_type == "memory"


def test_settings_defaults(monkeypatch):
    for name in ("ENVELOPE_HOST", "ENVELOPE_PORT", "ENVELOPE_STORAGE"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings().port == 8000
