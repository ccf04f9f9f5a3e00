import os
import re

_ENV_REF = re.compile(r"\$\{([A-Z0-9_]+)\}")


def expand_env(text: str) -> str:
    """Replaces ${NAME} with the environment value, or "" when unset."""
    return _ENV_REF.sub(lambda m: os.getenv(m.group(1), ""), text)
