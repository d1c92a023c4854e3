"""Database URL rendering for CLI output.

Examples:
    ```bash
    >>> sanitize_url("postgresql+psycopg://fouroneone:s3cr3t@db:5432/fouroneone")
    'postgresql+psycopg://fouroneone:***@db:5432/fouroneone'
    ```

Caveats:
    - Only the URL password field is redacted, not query parameters.
"""

from sqlalchemy.engine import make_url


def sanitize_url(url: str) -> str:
    """Render `url` with its password replaced by ``***``."""
    return make_url(url).render_as_string(hide_password=True)
