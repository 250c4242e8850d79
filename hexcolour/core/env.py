"""Configuration for hexcolour: .env loading and HEXCOLOUR_* settings.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read once the environment is loaded:

  HEXCOLOUR_FORMAT   text | json          (default: text)
  HEXCOLOUR_AMOUNT   tint/shade amount    (default: 0.2)
  HEXCOLOUR_STEPS    swatch steps a side  (default: 4)
  HEXCOLOUR_OUT_DIR  swatch PNG directory (default: .)

Unparseable numbers fall back to their defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    format: str = 'text'
    amount: float = 0.2
    steps: int = 4
    out_dir: str = '.'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return the first .env, giving up at a .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes around values are dropped, # lines skipped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if line.startswith('export '):
            line = line[len('export ') :]
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _number(name: str, cast, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


def settings() -> Settings:
    """Read HEXCOLOUR_* variables from the (already loaded) environment."""
    fmt = os.environ.get('HEXCOLOUR_FORMAT', 'text').strip().lower()
    return Settings(
        format=fmt if fmt in ('text', 'json') else 'text',
        amount=_number('HEXCOLOUR_AMOUNT', float, Settings.amount),
        steps=max(1, _number('HEXCOLOUR_STEPS', int, Settings.steps)),
        out_dir=os.environ.get('HEXCOLOUR_OUT_DIR') or Settings.out_dir,
    )
