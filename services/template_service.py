"""
Service for preparing alert groups for notification templates and previewing named templates against them. It wires the configured external URL and template directory into the template engine and logs what it renders; the templating core itself stays silent and raises.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Optional

from config import config
from models.alerting.requests import TemplateRenderRequest, TemplateRenderResponse
from models.alerting.template_data import ExtendedData, TemplateData
from services.templating import TemplateEngine, extend_data, tmpl_text

logger = logging.getLogger(__name__)


class TemplateService:

    def __init__(self, external_url: Optional[str] = None, templates_dir: Optional[str] = None):
        self.external_url = config.EXTERNAL_URL if external_url is None else external_url
        self.templates_dir = config.TEMPLATES_DIR if templates_dir is None else templates_dir

    def extend(self, data: TemplateData) -> ExtendedData:
        extended = extend_data(data)
        logger.debug("Extended %d alerts for receiver %s", len(extended.alerts), extended.receiver)
        return extended

    def render(self, request: TemplateRenderRequest) -> TemplateRenderResponse:
        external_url = self.external_url if request.external_url is None else request.external_url
        engine = TemplateEngine(
            external_url=external_url,
            templates=request.templates,
            search_path=self.templates_dir,
        )
        text, data = tmpl_text(engine, request.alerts, request.receiver, request.group_labels)

        names = request.names or list(request.templates)
        results = {name: text(name) for name in names}

        error = None
        if text.error is not None:
            error = str(text.error)
            logger.warning("Template rendering failed for receiver %s: %s", request.receiver, error)
        else:
            logger.info("Rendered %d templates for %d alerts", len(results), len(data.alerts))

        return TemplateRenderResponse(results=results, data=data, error=error)
