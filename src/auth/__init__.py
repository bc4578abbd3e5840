#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Authentication helpers (private cookies and password hashes).
#
"""
Authentication helpers (private cookies and password hashes).
"""

from .cookies import CookieCipher, AUTH_COOKIE_NAME, AUTH_COOKIE_VALUE
from .passwords import hash_password, verify_password

__all__ = [
    'CookieCipher',
    'AUTH_COOKIE_NAME',
    'AUTH_COOKIE_VALUE',
    'hash_password',
    'verify_password'
]
