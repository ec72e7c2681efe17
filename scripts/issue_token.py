"""Issue a development bearer token carrying permission claims.

Usage:
    python -m scripts.issue_token <subject> [permission_code ...]
    python -m scripts.issue_token <subject> --all
--all grants every code in the built-in catalog. Requires SECRET_KEY.
Unknown codes are accepted (the evaluator simply never matches them) but reported.
"""

import sys

from adminkit.application.services.permission_catalog import initialize_catalog
from adminkit.core.config import get_settings
from adminkit.infrastructure.security.jwt import create_access_token


def main() -> None:
    """Print a signed token for the given subject and codes."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.issue_token <subject> [permission_code ... | --all]",
            file=sys.stderr,
        )
        sys.exit(1)
    subject, codes = sys.argv[1], sys.argv[2:]

    if not get_settings().secret_key.get_secret_value():
        print("SECRET_KEY is not set", file=sys.stderr)
        sys.exit(1)

    catalog = initialize_catalog()
    if codes == ["--all"]:
        codes = sorted(catalog.all_codes())
    unknown = [code for code in codes if not catalog.exists(code)]
    if unknown:
        print(f"Warning: not in catalog: {', '.join(unknown)}", file=sys.stderr)
    print(create_access_token(subject, codes))


if __name__ == "__main__":
    main()
