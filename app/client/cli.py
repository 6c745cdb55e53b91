import argparse
import os
import sys

from app.client.api import ApiError, BrandMonitorClient
from app.client.views import ERROR, BrandDetailView, DashboardView
from app.core.logging import configure_logging


def _print_alert(message: str) -> None:
    print(f"! {message}", file=sys.stderr)


def _confirm(question: str) -> bool:
    return input(f"{question} [y/N] ").strip().lower() in {"y", "yes"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Brand Monitor command-line client")
    parser.add_argument("--base-url", default=os.getenv("BRAND_MONITOR_API", "http://127.0.0.1:8000"))
    parser.add_argument("--email", default=os.getenv("BRAND_MONITOR_EMAIL", "user1@example.com"))
    parser.add_argument("--password", default=os.getenv("BRAND_MONITOR_PASSWORD"))
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("brands", help="List brands")
    add = sub.add_parser("add", help="Add a brand")
    add.add_argument("name")
    add.add_argument("--prompt", default="")
    edit = sub.add_parser("edit", help="Edit a brand")
    edit.add_argument("brand_id", type=int)
    edit.add_argument("name")
    edit.add_argument("--prompt", default="")
    delete = sub.add_parser("delete", help="Delete a brand")
    delete.add_argument("brand_id", type=int)
    delete.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    show = sub.add_parser("show", help="Show a brand and its responses")
    show.add_argument("brand_id", type=int)
    generate = sub.add_parser("generate", help="Generate a response for a brand")
    generate.add_argument("brand_id", type=int)
    rate = sub.add_parser("rate", help="Rate a response")
    rate.add_argument("brand_id", type=int)
    rate.add_argument("response_id", type=int)
    rate.add_argument("value", choices=["up", "down"])
    return parser


def run(args: argparse.Namespace, client: BrandMonitorClient) -> int:
    if args.command in {"brands", "add", "edit", "delete"}:
        view = DashboardView(client, alert=_print_alert)
        view.load()
        if view.status == ERROR:
            print(view.render(), file=sys.stderr)
            return 1
        if args.command == "add" and view.add_brand(args.name, args.prompt) is None:
            return 1
        if args.command == "edit" and view.edit_brand(args.brand_id, args.name, args.prompt) is None:
            return 1
        if args.command == "delete":
            confirm = (lambda _question: True) if args.yes else _confirm
            if not view.delete_brand(args.brand_id, confirm):
                return 1
        print(view.render())
        return 0

    detail = BrandDetailView(client, args.brand_id, alert=_print_alert)
    detail.load()
    if detail.status == ERROR:
        return 1
    if args.command == "generate" and detail.generate() is None:
        return 1
    if args.command == "rate" and detail.rate(args.response_id, args.value == "up") is None:
        return 1
    print(detail.render())
    return 0


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    client = BrandMonitorClient(base_url=args.base_url)
    try:
        client.login(args.email, args.password or "")
    except ApiError as exc:
        print(f"Login failed: {exc.message}", file=sys.stderr)
        return 1
    try:
        return run(args, client)
    finally:
        try:
            client.logout()
        except ApiError as exc:
            print(f"Logout failed: {exc.message}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
