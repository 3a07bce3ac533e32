"""
Router for template data endpoints: extending an alert group with links and filtered metadata, and rendering named notification templates against a group of alerts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging

from fastapi import APIRouter, Body
from fastapi.concurrency import run_in_threadpool

from middleware.error_handlers import handle_route_errors
from models.alerting.requests import TemplateRenderRequest, TemplateRenderResponse
from models.alerting.template_data import ExtendedData, TemplateData
from services.template_service import TemplateService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/templates", tags=["templates"])

template_service = TemplateService()


@router.post("/extend", response_model=ExtendedData)
@handle_route_errors()
async def extend_template_data(payload: TemplateData = Body(...)) -> ExtendedData:
    logger.info("Extending template data with %d alerts for receiver %s", len(payload.alerts), payload.receiver)
    return await run_in_threadpool(template_service.extend, payload)


@router.post("/render", response_model=TemplateRenderResponse)
@handle_route_errors()
async def render_templates(payload: TemplateRenderRequest = Body(...)) -> TemplateRenderResponse:
    logger.info("Rendering %d templates for %d alerts", len(payload.names or payload.templates), len(payload.alerts))
    return await run_in_threadpool(template_service.render, payload)
