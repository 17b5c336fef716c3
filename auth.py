#!/usr/bin/env python3
"""
OAuth Authentication for drive-outline.

Runs the installed-app flow against credentials.json (OAuth client secrets
from the GCP Console) and stores the resulting token in token.json.

Usage:
    python -m auth                 # Opens a browser
    python -m auth --no-browser    # Prints the URL instead (remote/SSH)
"""

import argparse
import sys

from google_auth_oauthlib.flow import InstalledAppFlow

from oauth_config import (
    TOKEN_FILE,
    SCOPES,
    OAUTH_PORT,
    LOCAL_CREDENTIALS_FILE,
)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="OAuth authentication for drive-outline"
    )
    parser.add_argument(
        '--no-browser',
        action='store_true',
        help='Print the consent URL instead of opening a browser'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=OAUTH_PORT,
        help=f'Localhost callback port (default: {OAUTH_PORT})'
    )

    args = parser.parse_args()

    if not LOCAL_CREDENTIALS_FILE.exists():
        print(f"Error: {LOCAL_CREDENTIALS_FILE} not found")
        print("Download an OAuth client (Desktop app) from the GCP Console and save it there.")
        sys.exit(1)

    print(f"Using local credentials: {LOCAL_CREDENTIALS_FILE}")

    try:
        flow = InstalledAppFlow.from_client_secrets_file(str(LOCAL_CREDENTIALS_FILE), SCOPES)
        creds = flow.run_local_server(port=args.port, open_browser=not args.no_browser)
        TOKEN_FILE.write_text(creds.to_json())
        print()
        print(f"Authentication complete. {TOKEN_FILE} created.")
    except KeyboardInterrupt:
        print("\n\nAuthentication cancelled")
        sys.exit(1)
    except Exception as e:
        print(f"\nAuthentication failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
