"""
Module defines Pydantic models for alert data handed to notification templates: the grouped raw form produced by the template engine and the extended form with synthesized links and private metadata removed.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .alerts import AlertStatus

DESC_CURRENT_STATUS_ALERT = "Current status of the alert"
DESC_KEY_VALUE_PAIRS_IDENTIFY_ALERT = "Key-value pairs that identify the alert"
DESC_ADDITIONAL_INFO_ALERT = "Additional information about the alert"
DESC_TIME_ALERT_STARTED_FIRING = "Time when the alert started firing"
DESC_TIME_ALERT_STOPPED_FIRING = "Time when the alert stopped firing"
DESC_URL_ALERT_GENERATOR = "URL of the alert generator"
DESC_UNIQUE_IDENTIFIER_ALERT = "Fingerprint of the alert label set"
DESC_SILENCE_URL = "Link that opens a new silence prefilled with the alert labels"
DESC_DASHBOARD_URL = "Link to the dashboard the alert rule belongs to"
DESC_PANEL_URL = "Link to the dashboard panel the alert rule belongs to"
DESC_RECEIVER_HANDLE_ALERTS = "Receiver that will handle these alerts"
DESC_GROUP_STATUS = "firing if any alert in the group is firing, resolved otherwise"
DESC_LIST_ALERTS_GROUP = "List of alerts in this group"
DESC_GROUP_LABELS = "Labels the alerts were grouped by"
DESC_COMMON_LABELS_GROUP = "Labels shared by every alert in the group"
DESC_COMMON_ANNOTATIONS_GROUP = "Annotations shared by every alert in the group"
DESC_EXTERNAL_URL = "External base URL links are built from"


class TemplateAlert(BaseModel):
    status: AlertStatus = Field(..., description=DESC_CURRENT_STATUS_ALERT)
    labels: Dict[str, str] = Field(default_factory=dict, description=DESC_KEY_VALUE_PAIRS_IDENTIFY_ALERT)
    annotations: Dict[str, str] = Field(default_factory=dict, description=DESC_ADDITIONAL_INFO_ALERT)
    starts_at: Optional[datetime] = Field(None, alias="startsAt", description=DESC_TIME_ALERT_STARTED_FIRING)
    ends_at: Optional[datetime] = Field(None, alias="endsAt", description=DESC_TIME_ALERT_STOPPED_FIRING)
    generator_url: str = Field("", alias="generatorURL", description=DESC_URL_ALERT_GENERATOR)
    fingerprint: str = Field("", description=DESC_UNIQUE_IDENTIFIER_ALERT)

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, frozen=True)


class ExtendedAlert(TemplateAlert):
    silence_url: str = Field("", alias="silenceURL", description=DESC_SILENCE_URL)
    dashboard_url: str = Field("", alias="dashboardURL", description=DESC_DASHBOARD_URL)
    panel_url: str = Field("", alias="panelURL", description=DESC_PANEL_URL)


class TemplateData(BaseModel):
    receiver: str = Field("", description=DESC_RECEIVER_HANDLE_ALERTS)
    status: AlertStatus = Field(..., description=DESC_GROUP_STATUS)
    alerts: List[TemplateAlert] = Field(default_factory=list, description=DESC_LIST_ALERTS_GROUP)
    group_labels: Dict[str, str] = Field(default_factory=dict, alias="groupLabels", description=DESC_GROUP_LABELS)
    common_labels: Dict[str, str] = Field(default_factory=dict, alias="commonLabels", description=DESC_COMMON_LABELS_GROUP)
    common_annotations: Dict[str, str] = Field(
        default_factory=dict, alias="commonAnnotations", description=DESC_COMMON_ANNOTATIONS_GROUP
    )
    external_url: str = Field("", alias="externalURL", description=DESC_EXTERNAL_URL)

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, frozen=True)


class ExtendedData(TemplateData):
    alerts: List[ExtendedAlert] = Field(default_factory=list, description=DESC_LIST_ALERTS_GROUP)
