"""
Jinja2-backed template engine for alert notifications. It materializes raw alert instances into grouped template data (per-alert status and fingerprint, group status, common labels and annotations) and renders named templates against extended data.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from jinja2 import BaseLoader, ChoiceLoader, DictLoader, FileSystemLoader
from jinja2.exceptions import SecurityError
from jinja2.sandbox import ImmutableSandboxedEnvironment

from models.alerting.alerts import Alert, AlertStatus
from models.alerting.template_data import ExtendedData, TemplateAlert, TemplateData

from .errors import TemplateExecutionError
from .filters import firing, resolved
from .fingerprint import fingerprint

_REGEX_META = set("\\.+*?()|[]{}^$")


def quote_meta(value: str) -> str:
    return "".join("\\" + ch if ch in _REGEX_META else ch for ch in value)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def alert_status(alert: Alert, now: datetime) -> AlertStatus:
    if alert.ends_at is None:
        return AlertStatus.FIRING
    if _as_utc(alert.ends_at) > now:
        return AlertStatus.FIRING
    return AlertStatus.RESOLVED


def _common(first: Mapping[str, str], others: Iterable[Mapping[str, str]]) -> Dict[str, str]:
    common = dict(first)
    for kv in others:
        if not common:
            break
        common = {key: value for key, value in common.items() if kv.get(key) == value}
    return common


class _AlertTemplateSandbox(ImmutableSandboxedEnvironment):
    def unsafe_undefined(self, obj, attribute):
        raise SecurityError(f"access to attribute {attribute!r} of {type(obj).__name__!r} object is unsafe")


class TemplateEngine:
    """Holds the Jinja environment and the external URL used for every group it materializes."""

    def __init__(
        self,
        external_url: str = "",
        templates: Optional[Mapping[str, str]] = None,
        search_path: Optional[str] = None,
    ) -> None:
        self.external_url = external_url
        loaders: List[BaseLoader] = [DictLoader(dict(templates or {}))]
        if search_path and Path(search_path).is_dir():
            loaders.append(FileSystemLoader(search_path))

        # Template sources arrive over HTTP; private attributes and mutating calls fail the render
        self._environment = _AlertTemplateSandbox(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._environment.filters["firing"] = firing
        self._environment.filters["resolved"] = resolved

    def data(
        self,
        receiver: str,
        group_labels: Optional[Mapping[str, str]],
        alerts: List[Alert],
        now: Optional[datetime] = None,
    ) -> TemplateData:
        now = _as_utc(now or datetime.now(timezone.utc))

        template_alerts = [
            TemplateAlert(
                status=alert_status(alert, now),
                labels=dict(alert.labels),
                annotations=dict(alert.annotations),
                starts_at=alert.starts_at,
                ends_at=alert.ends_at,
                generator_url=alert.generator_url,
                fingerprint=fingerprint(alert.labels),
            )
            for alert in alerts
        ]

        common_labels: Dict[str, str] = {}
        common_annotations: Dict[str, str] = {}
        if alerts:
            common_labels = _common(alerts[0].labels, (a.labels for a in alerts[1:]))
            common_annotations = _common(alerts[0].annotations, (a.annotations for a in alerts[1:]))

        group_status = AlertStatus.RESOLVED
        if any(a.status == AlertStatus.FIRING.value for a in template_alerts):
            group_status = AlertStatus.FIRING

        return TemplateData(
            receiver=quote_meta(receiver),
            status=group_status,
            alerts=template_alerts,
            group_labels=dict(group_labels or {}),
            common_labels=common_labels,
            common_annotations=common_annotations,
            external_url=self.external_url,
        )

    def execute(self, name: str, data: ExtendedData) -> str:
        context = data.model_dump(by_alias=True, mode="json")
        try:
            return self._environment.get_template(name).render(context)
        except Exception as exc:
            raise TemplateExecutionError(name, str(exc) or exc.__class__.__name__) from exc
