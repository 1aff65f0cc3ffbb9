"""
OrderDesk - Command Line Interface

Entry point with subcommands:
- serve: Run the local API server
- order: Submit an order (mockup files are read concurrently)
- export: Write the filtered orders to a CSV file
- sync: Push the filtered orders to Google Sheets
- summary: Print the per-model size breakdown
"""

import argparse
import asyncio
import sys
from pathlib import Path

import uvicorn

from orderdesk import __version__
from orderdesk.config import get_app_settings
from orderdesk.dependencies import close_services, get_entity_store, get_sync_client
from orderdesk.schemas.fields import SIZES
from orderdesk.schemas.order import OrderFilter, OrderInput
from orderdesk.services.attachments import PendingAttachments
from orderdesk.services.entity_store import OrderValidationError
from orderdesk.services.export import export_filename, to_csv
from orderdesk.services.query import breakdown_rows, filter_orders
from orderdesk.services.sync_client import SyncError


def run_server(host: str | None, port: int | None, reload: bool) -> int:
    """Run the uvicorn server"""
    settings = get_app_settings()
    uvicorn.run(
        "orderdesk.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level="info",
    )
    return 0


def _select_tenant(args: argparse.Namespace):
    store = get_entity_store()
    if args.client and args.client != store.tenant_name:
        store.switch_tenant(args.client)
    return store


def _criteria(args: argparse.Namespace) -> OrderFilter:
    return OrderFilter(text=args.search or "", model=args.model or "", size=args.size or "")


async def submit_order(args: argparse.Namespace) -> int:
    """Read mockups, save the order, then wait for its background sync"""
    store = _select_tenant(args)

    model = next((m for m in store.available_models() if args.model in (m.id, m.name)), None)

    pending = PendingAttachments()
    for path in args.mockup or []:
        pending.add(path)
    try:
        attachments = await pending.resolved()
    except OSError as e:
        print(f"Could not read mockup: {e}", file=sys.stderr)
        return 1

    form = OrderInput(
        model_id=model.id if model else "",
        size=args.size,
        qty=args.qty,
        name=args.name,
        email=args.email,
        phone=args.phone,
        address=args.address,
        notes=args.notes,
        mockups=[attachment.data for attachment in attachments],
    )
    try:
        order = store.add_order(form)
    except OrderValidationError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"Order saved: {order.id} ({order.qty} x {order.model}, {order.size})")
    try:
        await get_sync_client().drain()
        if store.notifier is not None and store.notifier.current():
            print(store.notifier.current())
    finally:
        await close_services()
    return 0


def export_orders(args: argparse.Namespace) -> int:
    store = _select_tenant(args)
    orders = filter_orders(store.orders, _criteria(args))
    output = Path(args.output or export_filename(store.tenant_name))
    output.write_text(to_csv(orders), encoding="utf-8")
    print(f"Exported {len(orders)} order(s) to {output}")
    return 0


async def sync_orders(args: argparse.Namespace) -> int:
    store = _select_tenant(args)
    orders = filter_orders(store.orders, _criteria(args))
    try:
        await get_sync_client().push_orders(orders)
    except SyncError as e:
        print(str(e), file=sys.stderr)
        return 1
    finally:
        await close_services()
    print(f"Orders synced ({len(orders)}).")
    return 0


def print_summary(args: argparse.Namespace) -> int:
    store = _select_tenant(args)
    rows = breakdown_rows(store.orders)
    if not rows:
        print("No orders yet.")
        return 0

    width = max(len("Model"), *(len(row.model) for row in rows))
    print("Model".ljust(width), *(size.rjust(5) for size in SIZES), "Total".rjust(6))
    for row in rows:
        print(row.model.ljust(width), *(str(row.sizes[size]).rjust(5) for size in SIZES), str(row.total).rjust(6))
    return 0


def _add_filter_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--search", help="Search name, email, phone, address, notes, model or size")
    parser.add_argument("--model", help="Exact model name")
    parser.add_argument("--size", choices=SIZES, help="Exact size")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orderdesk",
        description="OrderDesk - local-first order intake",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  orderdesk serve --port 8000
  orderdesk order --model "Classic Tee — Black" --size L --qty 2 --name "Jane Doe" --mockup front.png
  orderdesk export --size M --output m_orders.csv
  orderdesk sync --search jane
  orderdesk --client "Other Crew" summary
""",
    )
    parser.add_argument("--version", "-v", action="version", version=f"OrderDesk {__version__}")
    parser.add_argument("--client", help="Client name (switches the active client)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the local API server")
    serve.add_argument("--host", help="Host to bind to")
    serve.add_argument("--port", type=int, help="Port to listen on")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    order = subparsers.add_parser("order", help="Submit an order")
    order.add_argument("--model", default="", help="Model name or ID (must be available)")
    order.add_argument("--size", choices=SIZES, default="M")
    order.add_argument("--qty", type=int, default=1)
    order.add_argument("--name", default="", help="Customer full name")
    order.add_argument("--email", default="")
    order.add_argument("--phone", default="")
    order.add_argument("--address", default="")
    order.add_argument("--notes", default="")
    order.add_argument("--mockup", action="append", help="Mockup image file (repeatable)")

    export = subparsers.add_parser("export", help="Export filtered orders to CSV")
    _add_filter_args(export)
    export.add_argument("--output", "-o", help="Output file (default: <client>_orders.csv)")

    sync = subparsers.add_parser("sync", help="Push filtered orders to Google Sheets")
    _add_filter_args(sync)

    subparsers.add_parser("summary", help="Print the per-model size breakdown")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        return run_server(args.host, args.port, args.reload)
    if args.command == "order":
        return asyncio.run(submit_order(args))
    if args.command == "export":
        return export_orders(args)
    if args.command == "sync":
        return asyncio.run(sync_orders(args))
    return print_summary(args)


if __name__ == "__main__":
    sys.exit(main())
