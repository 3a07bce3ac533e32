"""
Middleware components for the alert template data API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from .error_handlers import handle_route_errors, validation_exception_handler, general_exception_handler

__all__ = [
    "handle_route_errors",
    "validation_exception_handler",
    "general_exception_handler",
]
