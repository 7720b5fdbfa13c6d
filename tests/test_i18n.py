import json
from tiktok_downloader.i18n import I18n


def write_locale(tmp_path, locale, messages):
    (tmp_path / f"{locale}.json").write_text(json.dumps(messages), encoding="utf-8")


def test_loads_only_configured_locales(tmp_path):
    write_locale(tmp_path, "en", {"error": {"busy": "Busy {max}"}})
    write_locale(tmp_path, "pt", {"error": {"busy": "Ocupado {max}"}})
    write_locale(tmp_path, "de", {"error": {"busy": "Besetzt"}})

    messages = I18n(["en", "pt"], "en", locales_dir=str(tmp_path))

    assert set(messages.messages) == {"en", "pt"}
    assert messages.get("error.busy", locale="pt", max=3) == "Ocupado 3"
    assert messages.get("error.busy", locale="de", max=3) == "Busy 3"


def test_falls_back_to_default_locale_then_key(tmp_path):
    write_locale(tmp_path, "en", {"health": {"status": "ok"}})
    write_locale(tmp_path, "pt", {})

    messages = I18n(["pt"], "en", locales_dir=str(tmp_path))

    assert messages.get("health.status", locale="pt") == "ok"
    assert messages.get("health.missing", locale="pt") == "health.missing"
