# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""JWT creation and validation for participant bearer tokens."""

import logging
import os
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional, Tuple

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError

logger = logging.getLogger(__name__)


class JWTHandlerError(Exception):
    """Base exception for JWT handling failures."""


class JWTCreationError(JWTHandlerError):
    """Token could not be signed."""


class JWTValidationError(JWTHandlerError):
    """Token is malformed, has wrong claims, or cannot be verified."""


class JWTKeyUnavailableError(JWTHandlerError):
    """The configured verification key cannot be read."""


class JWTExpiredError(JWTValidationError):
    """Token expiry has passed."""


class JWTInvalidSignatureError(JWTValidationError):
    """Token signature does not match the configured public key."""


@dataclass
class JWTConfig:
    """JWT signing and verification settings.

    Attributes:
        private_key_path: PEM private key used to sign tokens.
        public_key_path: PEM public key used to verify tokens.
        algorithm: Signing algorithm.
        access_token_expire_minutes: Token lifetime.
        issuer: Expected ``iss`` claim.
        audience: Expected ``aud`` claim.
        key_id: ``kid`` header written into signed tokens.
    """

    private_key_path: str = "/etc/bookflow/keys/jwt_private.pem"
    public_key_path: str = "/etc/bookflow/keys/jwt_public.pem"
    algorithm: str = "RS256"
    access_token_expire_minutes: int = 60
    issuer: str = "bookflow-api"
    audience: str = "bookflow-api"
    key_id: str = "bookflow-key-1"

    @classmethod
    def from_env(cls) -> "JWTConfig":
        """Create configuration from environment variables."""
        return cls(
            private_key_path=os.getenv(
                "JWT_PRIVATE_KEY_PATH", "/etc/bookflow/keys/jwt_private.pem"
            ),
            public_key_path=os.getenv(
                "JWT_PUBLIC_KEY_PATH", "/etc/bookflow/keys/jwt_public.pem"
            ),
            algorithm=os.getenv("JWT_ALGORITHM", "RS256"),
            access_token_expire_minutes=int(
                os.getenv("JWT_ACCESS_TOKEN_EXPIRE_MINUTES", "60")
            ),
            issuer=os.getenv("JWT_ISSUER", "bookflow-api"),
            audience=os.getenv("JWT_AUDIENCE", "bookflow-api"),
            key_id=os.getenv("JWT_KEY_ID", "bookflow-key-1"),
        )


@dataclass(frozen=True)
class TokenData:
    """Claims extracted from a validated token."""

    subject: str
    token_id: str
    expires_at: datetime
    name: Optional[str] = None


class JWTHandler:
    """Signs and validates participant access tokens with python-jose.

    Also serves as the identity verifier: :meth:`verify` turns a bearer
    credential into the stable subject id the domain works with.
    """

    def __init__(self, config: Optional[JWTConfig] = None) -> None:
        self.config = config or JWTConfig.from_env()

    def create_access_token(
        self,
        subject: str,
        name: Optional[str] = None,
    ) -> Tuple[str, int]:
        """Sign a token for ``subject``.

        Returns:
            The encoded token and its lifetime in seconds.

        Raises:
            JWTCreationError: If the private key is unavailable or signing fails.
        """
        private_key = self._read_key(self.config.private_key_path, JWTCreationError)
        now = datetime.now(timezone.utc)
        lifetime = timedelta(minutes=self.config.access_token_expire_minutes)
        claims = {
            "iss": self.config.issuer,
            "sub": subject,
            "aud": self.config.audience,
            "iat": int(now.timestamp()),
            "nbf": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
            "jti": str(uuid.uuid4()),
        }
        if name:
            claims["name"] = name
        try:
            token = jwt.encode(
                claims,
                private_key,
                algorithm=self.config.algorithm,
                headers={"kid": self.config.key_id},
            )
        except JWTError as exc:
            logger.error("Failed to sign access token")
            raise JWTCreationError("Failed to sign access token") from exc
        return token, int(lifetime.total_seconds())

    def validate_token(self, token: str) -> TokenData:
        """Verify signature, expiry, issuer and audience of ``token``.

        Raises:
            JWTExpiredError: If the token has expired.
            JWTInvalidSignatureError: If the signature does not verify.
            JWTValidationError: For any other claim or format problem.
            JWTKeyUnavailableError: If the public key cannot be read.
        """
        public_key = self._read_key(
            self.config.public_key_path, JWTKeyUnavailableError
        )
        try:
            claims = jwt.decode(
                token,
                public_key,
                algorithms=[self.config.algorithm],
                audience=self.config.audience,
                issuer=self.config.issuer,
            )
        except ExpiredSignatureError as exc:
            raise JWTExpiredError("Token has expired") from exc
        except JWTClaimsError as exc:
            raise JWTValidationError(f"Invalid token claims: {exc}") from exc
        except JWTError as exc:
            if "signature" in str(exc).lower():
                raise JWTInvalidSignatureError("Token signature is invalid") from exc
            raise JWTValidationError("Token could not be decoded") from exc

        subject = claims.get("sub")
        if not subject:
            raise JWTValidationError("Token has no subject")
        return TokenData(
            subject=subject,
            token_id=claims.get("jti", ""),
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            name=claims.get("name"),
        )

    def verify(self, credential: str) -> str:
        """Return the subject id behind ``credential``.

        Raises:
            JWTValidationError: If the credential is not a valid token.
            JWTKeyUnavailableError: If the public key cannot be read.
        """
        return self.validate_token(credential).subject

    @staticmethod
    def _read_key(path: str, error_cls: type) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("JWT key not readable: %s", path)
            raise error_cls(f"JWT key not readable: {path}") from exc
