"""
Extension of grouped alert data for notification templates. Each alert gets dashboard, panel and silence links built from the external URL and its private metadata, then every private key is stripped from the labels and annotations templates can see.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Dict, Mapping

from models.alerting.template_data import ExtendedAlert, ExtendedData, TemplateAlert, TemplateData

from . import urls

DASHBOARD_UID_KEY = "__dashboardUid__"
PANEL_ID_KEY = "__panelId__"


def is_private_key(key: str) -> bool:
    return key.startswith("__") and key.endswith("__")


def remove_private_items(kv: Mapping[str, str]) -> Dict[str, str]:
    return {key: value for key, value in kv.items() if not is_private_key(key)}


def _private_value(alert: TemplateAlert, key: str) -> str:
    # rules put these in annotations; alerts imported from elsewhere may carry them as labels
    return alert.annotations.get(key) or alert.labels.get(key) or ""


def extend_alert(alert: TemplateAlert, external_url: str) -> ExtendedAlert:
    silence_url = dashboard_url = panel_url = ""

    # private keys must still be present here; they are stripped below
    if external_url:
        base = urls.parse_external_url(external_url)
        dashboard_uid = _private_value(alert, DASHBOARD_UID_KEY)
        if dashboard_uid:
            dashboard_url = urls.dashboard_url(base, dashboard_uid)
            panel_id = _private_value(alert, PANEL_ID_KEY)
            if panel_id:
                panel_url = urls.panel_url(base, dashboard_uid, panel_id)

        matchers = urls.silence_matchers(remove_private_items(alert.labels))
        silence_url = urls.silence_url(base, matchers)

    return ExtendedAlert(
        status=alert.status,
        labels=remove_private_items(alert.labels),
        annotations=remove_private_items(alert.annotations),
        starts_at=alert.starts_at,
        ends_at=alert.ends_at,
        generator_url=alert.generator_url,
        fingerprint=alert.fingerprint,
        silence_url=silence_url,
        dashboard_url=dashboard_url,
        panel_url=panel_url,
    )


def extend_data(data: TemplateData) -> ExtendedData:
    alerts = [extend_alert(alert, data.external_url) for alert in data.alerts]

    return ExtendedData(
        receiver=data.receiver,
        status=data.status,
        alerts=alerts,
        group_labels=data.group_labels,
        common_labels=remove_private_items(data.common_labels),
        common_annotations=remove_private_items(data.common_annotations),
        external_url=data.external_url,
    )
