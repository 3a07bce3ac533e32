"""
Label-set fingerprints compatible with Prometheus and Alertmanager: FNV-1a 64 over the label names in sorted order, each name and value followed by a 0xff separator byte.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Mapping

FNV_OFFSET_64 = 14695981039346656037
FNV_PRIME_64 = 1099511628211
SEPARATOR_BYTE = 0xFF
_MASK_64 = (1 << 64) - 1


def _hash_add(h: int, data: bytes) -> int:
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME_64) & _MASK_64
    return h


def fingerprint(labels: Mapping[str, str]) -> str:
    h = FNV_OFFSET_64
    separator = bytes([SEPARATOR_BYTE])
    for name in sorted(labels):
        h = _hash_add(h, name.encode("utf-8") + separator)
        h = _hash_add(h, labels[name].encode("utf-8") + separator)
    return f"{h:016x}"
