"""Command-line front end for the tracker API.

Usage:
  gdfarms init
  gdfarms items add "Tomatoes" 10 kg --buy 2 --sell 5
  gdfarms analytics
  gdfarms goal set 1000 400 2026-12-31
  gdfarms goal show
"""
import argparse
import json
import sys

import httpx

from gdfarms.client import (DEFAULT_BACKEND_URL, DEFAULT_STATE_FILE, ApiError,
                            IdentityStore, TrackerClient, bootstrap)


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def _user_id(client: TrackerClient, args: argparse.Namespace) -> str:
    state = bootstrap(client, IdentityStore(args.state_file))
    if state.offline:
        raise ApiError(503, "Backend unreachable (offline mode)")
    return state.user_id


def cmd_health(client: TrackerClient, _: argparse.Namespace) -> int:
    print_json(client.health())
    return 0


def cmd_init(client: TrackerClient, args: argparse.Namespace) -> int:
    print(_user_id(client, args))
    return 0


def _item_fields(args: argparse.Namespace) -> dict:
    return {
        "name": args.name,
        "quantity_value": args.quantity,
        "quantity_unit": args.unit,
        "buying_price": args.buy,
        "selling_price": args.sell,
    }


def cmd_items_list(client: TrackerClient, args: argparse.Namespace) -> int:
    items = client.list_items(_user_id(client, args))
    print(f"Found {len(items)} items")
    print_json(items)
    return 0


def cmd_items_add(client: TrackerClient, args: argparse.Namespace) -> int:
    print_json(client.add_item(_user_id(client, args), **_item_fields(args)))
    return 0


def cmd_items_update(client: TrackerClient, args: argparse.Namespace) -> int:
    print_json(client.update_item(_user_id(client, args), args.item_id, **_item_fields(args)))
    return 0


def cmd_items_delete(client: TrackerClient, args: argparse.Namespace) -> int:
    client.delete_item(_user_id(client, args), args.item_id)
    print(f"Deleted item {args.item_id}")
    return 0


def cmd_analytics(client: TrackerClient, args: argparse.Namespace) -> int:
    print_json(client.get_analytics(_user_id(client, args)))
    return 0


def cmd_settings_show(client: TrackerClient, args: argparse.Namespace) -> int:
    print_json(client.get_settings(_user_id(client, args)))
    return 0


def cmd_settings_set(client: TrackerClient, args: argparse.Namespace) -> int:
    user_id = _user_id(client, args)
    current = client.get_settings(user_id)
    units = current.get("unit_preferences") or {}
    settings = client.update_settings(
        user_id,
        currency=args.currency or current["currency"],
        app_name=args.app_name or current["app_name"],
        unit_preferences={
            "weight": args.weight or units.get("weight", "kg"),
            "volume": args.volume or units.get("volume", "liters"),
        },
    )
    print_json(settings)
    return 0


def cmd_goal_set(client: TrackerClient, args: argparse.Namespace) -> int:
    user_id = _user_id(client, args)
    print_json(client.set_goal(user_id, args.target_revenue, args.target_profit, args.deadline))
    return 0


def cmd_goal_show(client: TrackerClient, args: argparse.Namespace) -> int:
    progress = client.get_goal_progress(_user_id(client, args))
    if progress is None:
        print("No goal set yet. Set a goal to track your progress!")
        return 0

    goal = progress["goal"]
    print(f"Target revenue: {goal['target_revenue']}")
    print(f"Target profit:  {goal['target_profit']}")
    print(f"Deadline:       {goal['deadline']} ({progress['daysLeft']} days left)")
    print("Suggestions:")
    for line in progress["suggestions"]:
        print(f"  - {line}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GD Farms business tracker client")
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BACKEND_URL,
        help=f"API base URL (default: {DEFAULT_BACKEND_URL})",
    )
    parser.add_argument(
        "--state-file",
        default=str(DEFAULT_STATE_FILE),
        help="File holding this device's user id",
    )
    parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout in seconds")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("health", help="GET /api/health")
    subparsers.add_parser("init", help="POST /api/user/init and print the user id")

    # items
    items = subparsers.add_parser("items", help="Item routes (/api/items)")
    items_sub = items.add_subparsers(dest="items_cmd", required=True)
    items_sub.add_parser("list", help="GET /api/items/{userId}")
    for name in ("add", "update"):
        p = items_sub.add_parser(name, help=f"{'POST' if name == 'add' else 'PUT'} /api/items")
        if name == "update":
            p.add_argument("item_id", type=int, help="Item id")
        p.add_argument("name", help="Item name")
        p.add_argument("quantity", type=float, help="Quantity value")
        p.add_argument("unit", help="Quantity unit (e.g. kg)")
        p.add_argument("--buy", type=float, required=True, help="Buying price per unit")
        p.add_argument("--sell", type=float, required=True, help="Selling price per unit")
    p = items_sub.add_parser("delete", help="DELETE /api/items/{id}/{userId}")
    p.add_argument("item_id", type=int, help="Item id")

    subparsers.add_parser("analytics", help="GET /api/analytics/{userId}")

    # settings
    settings = subparsers.add_parser("settings", help="Settings routes (/api/settings)")
    settings_sub = settings.add_subparsers(dest="settings_cmd", required=True)
    settings_sub.add_parser("show", help="GET /api/settings/{userId}")
    p = settings_sub.add_parser("set", help="PUT /api/settings/{userId}")
    p.add_argument("--currency", default=None, help="Currency code (e.g. USD)")
    p.add_argument("--app-name", default=None, help="Display name")
    p.add_argument("--weight", default=None, help="Preferred weight unit")
    p.add_argument("--volume", default=None, help="Preferred volume unit")

    # goal
    goal = subparsers.add_parser("goal", help="Goal routes (/api/goals)")
    goal_sub = goal.add_subparsers(dest="goal_cmd", required=True)
    p = goal_sub.add_parser("set", help="POST /api/goals")
    p.add_argument("target_revenue", type=float)
    p.add_argument("target_profit", type=float)
    p.add_argument("deadline", help="YYYY-MM-DD")
    goal_sub.add_parser("show", help="GET /api/goals/{userId}/progress")

    return parser


HANDLERS = {
    "health": cmd_health,
    "init": cmd_init,
    "analytics": cmd_analytics,
    "items": {
        "list": cmd_items_list,
        "add": cmd_items_add,
        "update": cmd_items_update,
        "delete": cmd_items_delete,
    },
    "settings": {
        "show": cmd_settings_show,
        "set": cmd_settings_set,
    },
    "goal": {
        "set": cmd_goal_set,
        "show": cmd_goal_show,
    },
}


def main(argv: list[str] | None = None, transport: httpx.BaseTransport | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = HANDLERS[args.command]
    if isinstance(handler, dict):
        handler = handler[getattr(args, f"{args.command}_cmd")]

    try:
        with TrackerClient(
            args.base_url.rstrip("/"), transport=transport, timeout=args.timeout
        ) as client:
            return handler(client, args)
    except ApiError as e:
        print(f"Error ({e.status_code}): {e.message}", file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
