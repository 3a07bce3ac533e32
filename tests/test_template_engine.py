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

import os
from datetime import datetime, timezone

import pytest

from models.alerting.alerts import Alert
from services.templating.engine import TemplateEngine, alert_status, quote_meta
from services.templating.errors import TemplateExecutionError
from services.templating.extend import extend_data
from services.templating.fingerprint import fingerprint

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")


def _make_alert(**kwargs) -> Alert:
    base = {
        "labels": {"alertname": "DiskFull", "severity": "critical", "instance": "srv1"},
        "annotations": {"summary": "disk almost full", "__dashboardUid__": "abc"},
        "startsAt": "2026-01-01T11:00:00Z",
        "generatorURL": "https://grafana.example.com/alerting/list",
    }
    base.update(kwargs)
    return Alert(**base)


def test_fingerprint_is_stable_and_order_independent():
    a = fingerprint({"alertname": "A", "env": "prod"})
    b = fingerprint({"env": "prod", "alertname": "A"})
    assert a == b
    assert len(a) == 16
    int(a, 16)
    assert fingerprint({"alertname": "A", "env": "dev"}) != a


def test_fingerprint_of_empty_label_set():
    assert fingerprint({}) == "cbf29ce484222325"


def test_alert_status_uses_ends_at():
    assert alert_status(_make_alert(), NOW) == "firing"
    assert alert_status(_make_alert(endsAt="2026-01-01T13:00:00Z"), NOW) == "firing"
    assert alert_status(_make_alert(endsAt="2026-01-01T12:00:00Z"), NOW) == "resolved"
    assert alert_status(_make_alert(endsAt="2026-01-01T11:30:00Z"), NOW) == "resolved"


def test_quote_meta():
    assert quote_meta("team-a") == "team-a"
    assert quote_meta("a.b*(c)") == "a\\.b\\*\\(c\\)"


def test_data_groups_alerts():
    engine = TemplateEngine(external_url="https://grafana.example.com/")
    alerts = [
        _make_alert(),
        _make_alert(
            labels={"alertname": "DiskFull", "severity": "warning", "instance": "srv2"},
            endsAt="2026-01-01T11:30:00Z",
        ),
    ]
    data = engine.data("team-a", {"alertname": "DiskFull"}, alerts, now=NOW)

    assert data.receiver == "team-a"
    assert data.status == "firing"
    assert [a.status for a in data.alerts] == ["firing", "resolved"]
    assert data.alerts[0].fingerprint == fingerprint(alerts[0].labels)
    assert data.group_labels == {"alertname": "DiskFull"}
    assert data.common_labels == {"alertname": "DiskFull"}
    assert data.common_annotations == {"summary": "disk almost full", "__dashboardUid__": "abc"}
    assert data.external_url == "https://grafana.example.com/"


def test_data_all_resolved_and_empty():
    engine = TemplateEngine()
    data = engine.data("r", None, [_make_alert(endsAt="2026-01-01T11:30:00Z")], now=NOW)
    assert data.status == "resolved"
    assert data.common_labels == _make_alert().labels

    empty = engine.data("r", None, [], now=NOW)
    assert empty.alerts == []
    assert empty.status == "resolved"
    assert empty.common_labels == {}
    assert empty.common_annotations == {}


def test_execute_renders_named_template_with_filters():
    engine = TemplateEngine(
        external_url="https://grafana.example.com/",
        templates={
            "title": "[{{ status | upper }}:{{ alerts | firing | length }}] {{ groupLabels.alertname }}",
            "links": "{% for a in alerts | firing %}{{ a.dashboardURL }} {{ a.silenceURL }}{% endfor %}",
        },
    )
    data = extend_data(engine.data("team-a", {"alertname": "DiskFull"}, [_make_alert()], now=NOW))

    assert engine.execute("title", data) == "[FIRING:1] DiskFull"
    links = engine.execute("links", data)
    assert links.startswith("https://grafana.example.com/d/abc https://grafana.example.com/alerting/silence/new?")


def test_execute_hides_private_annotations():
    engine = TemplateEngine(templates={"ann": "{{ alerts[0].annotations | length }}"})
    data = extend_data(engine.data("r", None, [_make_alert()], now=NOW))
    assert engine.execute("ann", data) == "1"


def test_execute_loads_templates_from_search_path():
    engine = TemplateEngine(search_path=TEMPLATES_DIR)
    data = extend_data(engine.data("r", {"alertname": "DiskFull"}, [_make_alert(), _make_alert()], now=NOW))
    assert engine.execute("email.subject.j2", data) == "[FIRING:2] DiskFull"


def test_execute_missing_template_raises():
    engine = TemplateEngine()
    data = extend_data(engine.data("r", None, [], now=NOW))
    with pytest.raises(TemplateExecutionError) as excinfo:
        engine.execute("nope", data)
    assert excinfo.value.name == "nope"


def test_execute_broken_template_raises():
    engine = TemplateEngine(templates={"bad": "{% for a in alerts %}", "div": "{{ 1 / 0 }}"})
    data = extend_data(engine.data("r", None, [], now=NOW))
    with pytest.raises(TemplateExecutionError):
        engine.execute("bad", data)
    with pytest.raises(TemplateExecutionError):
        engine.execute("div", data)
