"""Contracting CLI: run the API server or print the dashboard."""
import argparse
import asyncio
import os
import sys

import httpx

from . import dashboard
from .client import DEFAULT_BASE_URL, ClientError, ContractingClient, Snapshot
from .config import load_config, setup_logging


def serve(args) -> None:
    import uvicorn

    if args.config:
        os.environ["CONFIG_PATH"] = args.config
    config = load_config(args.config)
    setup_logging(config)

    uvicorn.run(
        "contracting.app:app",
        host=args.host or config.server.host,
        port=args.port or config.server.port,
        reload=args.reload,
    )


def format_money(amount: float) -> str:
    return f"{amount:,.0f}"


def render_dashboard(snapshot: Snapshot) -> str:
    """Plain-text version of the dashboard and profit/loss pages."""
    stats = dashboard.project_stats(snapshot.projects)
    labor = dashboard.labor_distribution(snapshot.employees)
    pl = dashboard.profit_loss(
        statements=snapshot.statements,
        payments=snapshot.payments,
        employees=snapshot.employees,
        equipment=snapshot.equipment,
        projects=snapshot.projects,
    )

    lines = [
        "📊 Projects",
        f"   Total: {stats.total}  (planned {stats.planned}, in progress {stats.in_progress}, "
        f"completed {stats.completed}, on hold {stats.on_hold})",
        f"   Average progress: {stats.avg_progress}%",
        "",
        "👷 Active labor by specialization",
    ]
    if labor:
        lines += [f"   {share.specialization}: {share.count}" for share in labor]
    else:
        lines.append("   (no active employees)")

    sign = "+" if pl.net_profit >= 0 else ""
    lines += [
        "",
        "💰 Profit & loss",
        f"   Revenue (paid statements): {format_money(pl.revenue)}",
        f"   Expenses (outgoing payments): {format_money(pl.expenses)}",
        f"   Net profit: {sign}{format_money(pl.net_profit)}  (margin {pl.profit_margin:.1f}%)",
        f"   Monthly labor estimate: {format_money(pl.labor_cost)}",
        f"   Monthly equipment estimate: {format_money(pl.equipment_cost)}",
        f"   Pending statements: {format_money(pl.pending_statements)}",
    ]
    return "\n".join(lines)


async def _load(url: str) -> Snapshot:
    async with ContractingClient(base_url=url) as client:
        return await client.load_all()


def show_dashboard(args) -> None:
    try:
        snapshot = asyncio.run(_load(args.url))
    except ClientError as e:
        print(f"❌ API error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"❌ Cannot reach {args.url}: {e}", file=sys.stderr)
        sys.exit(1)
    print(render_dashboard(snapshot))


def main(argv=None):
    parser = argparse.ArgumentParser(description='Contracting Management')
    sub = parser.add_subparsers(dest='command', required=True)

    p_serve = sub.add_parser('serve', help='Run the API server')
    p_serve.add_argument('--host', help='Bind address (default from config)')
    p_serve.add_argument('--port', type=int, help='Port (default from config, 4000)')
    p_serve.add_argument('--config', help='Path to YAML config')
    p_serve.add_argument('--reload', action='store_true', help='Auto-reload on code changes')
    p_serve.set_defaults(func=serve)

    p_dash = sub.add_parser('dashboard', help='Print dashboard figures from a running API')
    p_dash.add_argument('--url', default=DEFAULT_BASE_URL, help='API base URL')
    p_dash.set_defaults(func=show_dashboard)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == '__main__':
    main()
