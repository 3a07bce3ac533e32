"""
Module defines Pydantic models for raw alert instances as they arrive from an Alertmanager-compatible source, before they are grouped into template data.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

DESC_KEY_VALUE_PAIRS_IDENTIFY_ALERT = "Key-value pairs that identify the alert"
DESC_ADDITIONAL_INFO_ALERT = "Additional information about the alert"
DESC_TIME_ALERT_STARTED_FIRING = "Time when the alert started firing"
DESC_TIME_ALERT_STOPPED_FIRING = "Time when the alert stopped firing"
DESC_URL_ALERT_GENERATOR = "URL of the alert generator"


class AlertStatus(str, Enum):
    FIRING = "firing"
    RESOLVED = "resolved"


class Alert(BaseModel):
    labels: Dict[str, str] = Field(default_factory=dict, description=DESC_KEY_VALUE_PAIRS_IDENTIFY_ALERT)
    annotations: Dict[str, str] = Field(default_factory=dict, description=DESC_ADDITIONAL_INFO_ALERT)
    starts_at: Optional[datetime] = Field(None, alias="startsAt", description=DESC_TIME_ALERT_STARTED_FIRING)
    ends_at: Optional[datetime] = Field(None, alias="endsAt", description=DESC_TIME_ALERT_STOPPED_FIRING)
    generator_url: str = Field("", alias="generatorURL", description=DESC_URL_ALERT_GENERATOR)

    model_config = ConfigDict(populate_by_name=True)
