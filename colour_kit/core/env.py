"""Environment and .env loading for colour-kit.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  COLOUR_KIT_HEX_CASE   lower | upper     (default lower)
  COLOUR_KIT_OUTPUT     text | json       (default text)
  COLOUR_KIT_PREFIX     1/true/yes to prefix hex output with '#'
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Settings:
    upper: bool = False
    output: str = 'text'
    prefix: bool = False


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes and a leading 'export ' are stripped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from COLOUR_KIT_* variables. Unknown values fall back to defaults."""
    env = os.environ if environ is None else environ
    case = env.get('COLOUR_KIT_HEX_CASE', 'lower').strip().lower()
    output = env.get('COLOUR_KIT_OUTPUT', 'text').strip().lower()
    prefix = env.get('COLOUR_KIT_PREFIX', '').strip().lower() in _TRUTHY
    return Settings(
        upper=case == 'upper',
        output=output if output in ('text', 'json') else 'text',
        prefix=prefix,
    )
