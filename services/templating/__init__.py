"""
Alert data preparation for notification templates: private metadata filtering, deep-link synthesis, status filters and the Jinja2 template engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from .engine import TemplateEngine
from .errors import InvalidConfigURL, TemplateDataError, TemplateExecutionError
from .extend import extend_alert, extend_data, is_private_key, remove_private_items
from .filters import firing, resolved
from .fingerprint import fingerprint
from .text import TemplateText, tmpl_text

__all__ = [
    "TemplateEngine",
    "InvalidConfigURL",
    "TemplateDataError",
    "TemplateExecutionError",
    "extend_alert",
    "extend_data",
    "is_private_key",
    "remove_private_items",
    "firing",
    "resolved",
    "fingerprint",
    "TemplateText",
    "tmpl_text",
]
