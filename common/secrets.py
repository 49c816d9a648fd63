import json
import os
from pathlib import Path
from typing import Any, Iterable, Optional

from dotenv import load_dotenv


class SecretsManager:
    """Resolve credentials from a JSON secrets file, falling back to the environment.

    The file pointed to by ``SECRETS_PATH`` is read once and cached. Keys that
    are missing from it are looked up in ``os.environ`` so that plain env vars
    (or a ``.env`` file loaded through :func:`load_env_files`) keep working.
    Tests may replace the cache via :meth:`set_override` or :meth:`update`.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(
            path or os.getenv("SECRETS_PATH", "/var/run/secrets/liquidity.json")
        )
        self._cache: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._cache is None:
            try:
                with self._path.open("r", encoding="utf-8") as fh:
                    self._cache = json.load(fh)
            except FileNotFoundError:
                self._cache = {}
        return self._cache

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Return the secret for *key*, then ``os.environ[key]``, then *default*."""

        cached = self._load()
        if key in cached:
            return cached[key]
        return os.environ.get(key, default)

    def set_override(self, data: dict[str, Any]) -> None:
        """Replace the entire secret cache (test helper)."""

        self._cache = dict(data)

    def update(self, data: dict[str, Any]) -> None:
        """Merge *data* into the existing cache (test helper)."""

        current = self._load()
        current.update(data)
        self._cache = current


# Global default manager
secrets = SecretsManager()


def get_secret(key: str, default: Optional[Any] = None) -> Any:
    """Convenience wrapper around :class:`SecretsManager`."""

    return secrets.get(key, default)


def load_env_files(candidates: Iterable[str | Path] = (".env.local", ".env")) -> Optional[Path]:
    """Load the first existing dotenv file among *candidates*.

    Variables already present in the process environment win. Returns the
    path that was loaded, or ``None`` when no candidate exists.
    """
    for f in candidates:
        path = Path(f)
        if path.exists():
            load_dotenv(dotenv_path=path, override=False)
            return path
    return None
