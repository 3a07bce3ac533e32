"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

try:
    from ._env import ensure_test_env
except ImportError:
    from tests._env import ensure_test_env
ensure_test_env()

import pytest

from models.alerting.alerts import Alert
from services.templating.engine import TemplateEngine
from services.templating.errors import InvalidConfigURL, TemplateExecutionError
from services.templating.text import TemplateText, tmpl_text


def _make_alert(**kwargs) -> Alert:
    base = {
        "labels": {"alertname": "HighLatency", "service": "api", "__alert_rule_uid__": "r1"},
        "annotations": {"summary": "p99 above 2s", "__dashboardUid__": "lat", "__panelId__": "3"},
        "startsAt": "2026-01-01T00:00:00Z",
    }
    base.update(kwargs)
    return Alert(**base)


def _engine(**templates) -> TemplateEngine:
    return TemplateEngine(external_url="https://example.com/", templates=templates)


def test_tmpl_text_returns_extended_data():
    text, data = tmpl_text(_engine(title="{{ commonLabels.alertname }}"), [_make_alert()], receiver="ops")

    assert isinstance(text, TemplateText)
    assert data.receiver == "ops"
    assert data.alerts[0].labels == {"alertname": "HighLatency", "service": "api"}
    assert data.alerts[0].panel_url == "https://example.com/d/lat?viewPanel=3"
    assert data.common_labels == {"alertname": "HighLatency", "service": "api"}
    assert text("title") == "HighLatency"
    assert text.error is None


def test_first_error_is_kept_and_later_calls_are_skipped(monkeypatch):
    engine = _engine(ok="fine", other="also fine")
    text, _ = tmpl_text(engine, [_make_alert()])

    assert text("ok") == "fine"
    assert text("missing") == ""
    first = text.error
    assert isinstance(first, TemplateExecutionError)
    assert first.name == "missing"

    calls = []
    monkeypatch.setattr(engine, "execute", lambda name, data: calls.append(name) or "x")
    assert text("other") == ""
    assert text("missing-too") == ""
    assert calls == []
    assert text.error is first


def test_raise_for_error():
    text, _ = tmpl_text(_engine(), [_make_alert()])
    text.raise_for_error()
    text("missing")
    with pytest.raises(TemplateExecutionError):
        text.raise_for_error()


def test_invalid_external_url_raises_before_rendering():
    engine = TemplateEngine(external_url="https://exa mple.com/\x01", templates={"t": "x"})
    with pytest.raises(InvalidConfigURL):
        tmpl_text(engine, [_make_alert()])


def test_no_alerts_still_renders():
    text, data = tmpl_text(_engine(count="{{ alerts | length }}"), [])
    assert data.alerts == []
    assert text("count") == "0"


def test_runaway_recursion_is_latched():
    text, _ = tmpl_text(_engine(r="{% macro f() %}{{ f() }}{% endmacro %}{{ f() }}", ok="fine"), [_make_alert()])

    assert text("r") == ""
    assert isinstance(text.error, TemplateExecutionError)
    assert text.error.name == "r"
    assert text("ok") == ""
