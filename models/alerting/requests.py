"""
Request and response models for the template API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .alerts import Alert
from .template_data import ExtendedData


class TemplateRenderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    templates: Dict[str, str] = Field(default_factory=dict, description="Template sources keyed by template name")
    names: List[str] = Field(default_factory=list, description="Templates to render, in order; defaults to every supplied template")
    alerts: List[Alert] = Field(default_factory=list)
    receiver: str = ""
    group_labels: Dict[str, str] = Field(default_factory=dict, alias="groupLabels")
    external_url: Optional[str] = Field(None, alias="externalURL", description="Overrides the configured external URL")


class TemplateRenderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    results: Dict[str, str] = Field(default_factory=dict)
    data: ExtendedData
    error: Optional[str] = None
