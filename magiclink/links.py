"""Magic link issuance on top of a token generator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from .config import DEFAULT_VALIDITY, EngineSettings
from .errors import ConfigurationError, InvalidToken
from .token.engine import TokenEngine
from .token.types import TokenGenerator
from .utils.time import utc_now

DEFAULT_PARAM = "mauth_token"

Normalizer = Callable[[str], str]


@dataclass(frozen=True)
class IssuedLink:
    email: str
    token: str
    url: str
    expiration: datetime


class MagicLinks:
    """Build login links carrying a token and validate them on return.

    Sending the link and rendering the email are left to the caller.
    """

    def __init__(
        self,
        generator: TokenGenerator,
        base_url: str,
        *,
        param: str = DEFAULT_PARAM,
        default_validity: timedelta = DEFAULT_VALIDITY,
        normalizer: Optional[Normalizer] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        parts = urlsplit(base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError("only http or https url schemes are supported")
        if not param:
            raise ConfigurationError("query parameter name cannot be empty")
        if default_validity <= timedelta(0):
            raise ConfigurationError("default validity must be positive")
        self.generator = generator
        self.base_url = base_url
        self.param = param
        self.default_validity = default_validity
        self.normalizer = normalizer
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: EngineSettings, base_url: str, **kwargs) -> "MagicLinks":
        kwargs.setdefault("default_validity", settings.default_validity)
        return cls(TokenEngine.from_settings(settings), base_url, **kwargs)

    def issue(self, email: str, validity: Optional[timedelta] = None) -> IssuedLink:
        """Create a token for ``email`` and embed it in the base URL."""
        if self.normalizer is not None:
            email = self.normalizer(email)
        expiration = self._clock() + (validity if validity is not None else self.default_validity)
        token = self.generator.generate(email, expiration)
        return IssuedLink(email=email, token=token, url=self._link(token), expiration=expiration)

    def validate(self, token: str) -> str:
        return self.generator.validate(token)

    def validate_url(self, url: str) -> str:
        """Validate the token carried by a magic link URL."""
        values = parse_qs(urlsplit(url).query).get(self.param)
        if not values or not values[0]:
            raise InvalidToken()
        return self.generator.validate(values[0])

    def _link(self, token: str) -> str:
        parts = urlsplit(self.base_url)
        query = [(k, v) for k, vs in parse_qs(parts.query, keep_blank_values=True).items() for v in vs if k != self.param]
        query.append((self.param, token))
        return urlunsplit(parts._replace(query=urlencode(query)))
