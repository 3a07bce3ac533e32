"""
Status filters over extended alerts, usable from Python and, as Jinja filters, from templates where alerts are plain dicts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Iterable, List

from models.alerting.alerts import AlertStatus


def _status(alert: Any) -> Any:
    if isinstance(alert, dict):
        return alert.get("status")
    return getattr(alert, "status", None)


def _with_status(alerts: Iterable[Any], status: AlertStatus) -> List[Any]:
    return [alert for alert in alerts if _status(alert) == status.value]


def firing(alerts: Iterable[Any]) -> List[Any]:
    """Returns the subset of alerts that are firing."""
    return _with_status(alerts, AlertStatus.FIRING)


def resolved(alerts: Iterable[Any]) -> List[Any]:
    """Returns the subset of alerts that are resolved."""
    return _with_status(alerts, AlertStatus.RESOLVED)
