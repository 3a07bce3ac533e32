"""
Resolver that prepares extended alert data for one notification and hands back a text function rendering named templates against it. Rendering errors do not raise from the text function; the first one is kept on the returned object so a caller can render many templates and check once at the end.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Tuple

from models.alerting.alerts import Alert
from models.alerting.template_data import ExtendedData

from .engine import TemplateEngine
from .errors import TemplateExecutionError
from .extend import extend_data


class TemplateText:
    """Renders named templates against one ExtendedData.

    Once a render fails the error is stored on ``error`` and every later call
    returns an empty string without touching the engine. Not safe to share
    between concurrent callers.
    """

    def __init__(self, engine: TemplateEngine, data: ExtendedData) -> None:
        self.engine = engine
        self.data = data
        self.error: Optional[TemplateExecutionError] = None

    def __call__(self, name: str) -> str:
        if self.error is not None:
            return ""
        try:
            return self.engine.execute(name, self.data)
        except TemplateExecutionError as exc:
            self.error = exc
            return ""

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def tmpl_text(
    engine: TemplateEngine,
    alerts: List[Alert],
    receiver: str = "",
    group_labels: Optional[Mapping[str, str]] = None,
) -> Tuple[TemplateText, ExtendedData]:
    data = extend_data(engine.data(receiver, group_labels, alerts))
    return TemplateText(engine, data), data
