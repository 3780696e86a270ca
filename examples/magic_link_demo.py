"""Example issuing and validating a magic link with keys from the environment."""

from __future__ import annotations

import base64
import logging
import os
from datetime import timedelta

from magiclink import EngineSettings, InvalidToken, MagicLinks, generate_random_key
from magiclink.config import ENV_CIPHER_KEY, ENV_MAC_KEY


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # Throwaway keys when none are configured.
    os.environ.setdefault(ENV_MAC_KEY, base64.b64encode(generate_random_key(32)).decode())
    os.environ.setdefault(ENV_CIPHER_KEY, base64.b64encode(generate_random_key(16)).decode())

    settings = EngineSettings.from_env()
    links = MagicLinks.from_settings(settings, "https://example.com/login", normalizer=str.lower)

    issued = links.issue("Someone@Example.com")
    print("Link:", issued.url)
    print("Expires:", issued.expiration.isoformat())
    print("Validated email:", links.validate_url(issued.url))

    expired = links.issue("someone@example.com", validity=timedelta(seconds=-1))
    try:
        links.validate(expired.token)
    except InvalidToken as exc:
        print("Expired link rejected:", exc)


if __name__ == "__main__":
    main()
