# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .statistics.entities import Resource, SuicideFilter, SuicideRecord, Testimonial
from .users.entities import SessionToken, TokenClaims, User, UserChanges

__all__ = [
    "Resource",
    "SessionToken",
    "SuicideFilter",
    "SuicideRecord",
    "Testimonial",
    "TokenClaims",
    "User",
    "UserChanges",
]
