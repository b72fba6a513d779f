"""
Club Pass admin CLI.

Signs an operator in with an API key and remembers the key between runs,
the way the admin panel does in the browser.

Usage:
    python admin_cli.py login <api-key>
    python admin_cli.py status
    python admin_cli.py revoke
    python admin_cli.py logout
"""

import argparse
import asyncio
import sys

from rich.console import Console

from shared.config import get_settings
from shared.database import get_supabase_anon_client
from shared.logging import configure_logging
from modules.activity.repository import ActivityLogRepository
from modules.activity.service import ActivityLogger
from modules.api_keys.gate import ApiKeyAuthGate
from modules.api_keys.models import ApiKeyAuthState
from modules.api_keys.repository import ApiKeyRepository
from modules.api_keys.service import ApiKeyService
from modules.api_keys.store import FileKeyStore
from modules.auth.service import AuthService

console = Console()


def build_gate() -> ApiKeyAuthGate:
    """Wire the gate against the anon Supabase client and the file key store."""
    settings = get_settings()
    db = get_supabase_anon_client()
    service = ApiKeyService(
        repository=ApiKeyRepository(db),
        auth=AuthService(db),
        activity=ActivityLogger(ActivityLogRepository(db)),
    )
    return ApiKeyAuthGate(service, FileKeyStore(settings.api_key_store_path))


def print_state(state: ApiKeyAuthState) -> None:
    if not state.is_authenticated:
        console.print("[yellow]Not signed in[/yellow]")
        return
    role = "[green]admin[/green]" if state.is_admin else "[dim]user[/dim]"
    console.print(f"[bold]Signed in[/bold] as {state.owner_id} ({role})")


async def login(gate: ApiKeyAuthGate, key: str) -> int:
    if not await gate.authenticate(key):
        console.print("[red]Error:[/red] Invalid API key")
        return 1
    print_state(gate.snapshot())
    if not gate.snapshot().is_admin:
        console.print("[yellow]Warning:[/yellow] this key does not grant admin access")
    return 0


async def status(gate: ApiKeyAuthGate) -> int:
    state = await gate.restore()
    print_state(state)
    return 0 if state.is_authenticated else 1


async def revoke(gate: ApiKeyAuthGate) -> int:
    state = await gate.restore()
    if not state.is_authenticated:
        print_state(state)
        return 1
    if not await gate.revoke():
        console.print("[red]Error:[/red] Could not revoke API key")
        return 1
    console.print("API key revoked and forgotten")
    return 0


def logout(gate: ApiKeyAuthGate) -> int:
    gate.sign_out()
    console.print("Signed out")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Club Pass admin CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    login_parser = subparsers.add_parser("login", help="Validate and remember an API key")
    login_parser.add_argument("key", help="API key")
    subparsers.add_parser("status", help="Revalidate the remembered API key")
    subparsers.add_parser("revoke", help="Revoke the remembered API key and forget it")
    subparsers.add_parser("logout", help="Forget the remembered API key")

    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    try:
        gate = build_gate()
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    if args.command == "login":
        return asyncio.run(login(gate, args.key))
    if args.command == "status":
        return asyncio.run(status(gate))
    if args.command == "revoke":
        return asyncio.run(revoke(gate))
    return logout(gate)


if __name__ == "__main__":
    sys.exit(main())
