#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Private (encrypted and authenticated) cookie values.
#
"""
Private cookie values.

A private cookie carries a Fernet token instead of the plain value, so the
client can neither read nor forge it. Only the server holding the key can
turn the token back into the value.
"""

import logging
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken

logger = logging.getLogger("uvicorn.error")

AUTH_COOKIE_NAME = "auth"
AUTH_COOKIE_VALUE = "true"


class CookieCipher:
    """
    Seals and unseals private cookie values.
    
    Without a configured key a random one is generated: every cookie issued
    before a restart becomes invalid.
    """

    def __init__(self, key: Optional[str] = None):
        """
        Args:
            key: Base64-encoded Fernet key; empty/None generates one
        
        Raises:
            ValueError: key is not a valid Fernet key
        """
        if not key:
            logger.warning("No cookie key configured, generating a random one. "
                           "Sessions will not survive a restart.")
            key = Fernet.generate_key().decode()
        self.cipher = Fernet(key.encode())

    def seal(self, value: str) -> str:
        """Encrypts a cookie value into a URL-safe token."""
        return self.cipher.encrypt(value.encode()).decode()

    def unseal(self, token: Optional[str]) -> Optional[str]:
        """
        Decrypts a token produced by seal().

        Returns:
            The value, or None if the token is missing, tampered with or
            sealed with another key
        """
        if not token:
            return None
        try:
            return self.cipher.decrypt(token.encode()).decode()
        except (InvalidToken, UnicodeError):
            return None

    def is_authenticated(self, token: Optional[str]) -> bool:
        return self.unseal(token) == AUTH_COOKIE_VALUE
