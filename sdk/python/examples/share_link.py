#!/usr/bin/env python3
"""
Shared link example.

This example demonstrates creating, listing, and revoking shared links.
Requires an access token with the 'sharing.write' scope.
"""

import logging
import os
import sys
from datetime import datetime, timedelta, timezone

from dbxsharing import DropboxClient, SharedLinkSettings, VisibilityType
from dbxsharing.exceptions import AuthenticationError, DropboxError


def create_link(client: DropboxClient, path: str, days: int = 0):
    """Create a shared link, optionally expiring after some days."""
    settings = SharedLinkSettings(requested_visibility=VisibilityType.PUBLIC)
    if days:
        settings.expires = datetime.now(timezone.utc) + timedelta(days=days)

    print(f"Sharing {path}...")
    link = client.sharing.create_shared_link_with_settings(path, settings)
    print(f"  URL: {link.url}")
    if link.link_permissions.resolved_visibility:
        print(f"  Visibility: {link.link_permissions.resolved_visibility.value}")
    if link.expires:
        print(f"  Expires: {link.expires.strftime('%Y-%m-%d %H:%M')}")
    print(f"  Request ID: {link.headers.get('x-dropbox-request-id', '-')}")


def list_links(client: DropboxClient, path: str = None):
    """List all shared links, following the cursor."""
    print("\n=== Shared Links ===\n")

    page = client.sharing.list_shared_links(path=path)
    while True:
        for link in page.links:
            can_revoke = "yes" if link.link_permissions.can_revoke else "no"
            print(f"{link.name}")
            print(f"  URL: {link.url}")
            print(f"  Can revoke: {can_revoke}")
            print()
        if not page.has_more:
            break
        page = client.sharing.list_shared_links(cursor=page.cursor)


def revoke_link(client: DropboxClient, url: str):
    """Revoke a shared link."""
    print(f"Revoking {url}...")
    client.sharing.revoke_shared_link(url)
    print("Done!")


def main():
    access_token = os.environ.get("DROPBOX_ACCESS_TOKEN")

    if not access_token:
        print("Error: DROPBOX_ACCESS_TOKEN environment variable is required")
        sys.exit(1)

    if os.environ.get("DROPBOX_DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    if len(sys.argv) < 2:
        print("Usage: python share_link.py <command> [args]")
        print("\nCommands:")
        print("  share <path> [days]  - Create a shared link")
        print("  list [path]          - List shared links")
        print("  revoke <url>         - Revoke a shared link")
        print("\nEnvironment variables:")
        print("  DROPBOX_ACCESS_TOKEN - OAuth2 access token (required)")
        print("  DROPBOX_DEBUG        - Log HTTP calls when set")
        sys.exit(1)

    command = sys.argv[1].lower()

    try:
        with DropboxClient(access_token=access_token) as client:
            if command == "share":
                if len(sys.argv) < 3:
                    print("Usage: python share_link.py share <path> [days]")
                    sys.exit(1)
                days = int(sys.argv[3]) if len(sys.argv) > 3 else 0
                create_link(client, sys.argv[2], days)

            elif command == "list":
                list_links(client, sys.argv[2] if len(sys.argv) > 2 else None)

            elif command == "revoke":
                if len(sys.argv) < 3:
                    print("Usage: python share_link.py revoke <url>")
                    sys.exit(1)
                revoke_link(client, sys.argv[2])

            else:
                print(f"Unknown command: {command}")
                sys.exit(1)

    except AuthenticationError as e:
        print(f"Authentication error: {e}")
        sys.exit(1)
    except DropboxError as e:
        print(f"Dropbox error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
