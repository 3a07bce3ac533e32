"""
Exceptions raised while preparing alert data for notification templates and while rendering those templates.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations


class TemplateDataError(Exception):
    pass


class InvalidConfigURL(TemplateDataError, ValueError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"failed to parse external URL: {reason}")


class TemplateExecutionError(TemplateDataError):
    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"failed to execute template '{name}': {reason}")
