"""
入口：加载 .env 与 config.yaml、初始化 logger、构建 RecordStore，执行单个命令。
Commands: list | pin <group-id> | unpin <group-id>.
"""
import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

_root = Path(__file__).resolve().parent
load_dotenv(_root / ".env")

from core.registry import build_store_from_config, load_config
from storage.errors import StoreError
from storage.record_store import RecordStore
from utils.logger import setup_logger
from utils.time_utils import get_timezone, now_iso


async def list_groups(store: RecordStore) -> None:
    groups = await store.fetch_pair_groups()
    for g in sorted(groups, key=lambda g: (not g.is_pinned, g.id)):
        mark = "*" if g.is_pinned else " "
        print(f"{mark} {g.id}")
        for p in g.pairs:
            print(f"    {p.base}/{p.comparison} = {p.value}")


async def set_pinned(store: RecordStore, group_id: str, pinned: bool, tz: str) -> None:
    groups = await store.fetch_pair_groups()
    group = next((g for g in groups if g.id == group_id), None)
    if group is None:
        raise StoreError(f"Pair group to update does not exist: {group_id}")
    await store.update_pair_group(replace(group, is_pinned=pinned, updated_at=now_iso(tz)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pair group store")
    parser.add_argument("--config", default=str(_root / "config.yaml"), help="config.yaml 路径")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="列出所有 pair groups")
    for name in ("pin", "unpin"):
        p = sub.add_parser(name, help=f"{name} a pair group")
        p.add_argument("group_id")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        return 1

    system = config.get("system") or {}
    setup_logger(level=system.get("log_level", "INFO"), log_file=system.get("log_file"))
    store = build_store_from_config(config)

    try:
        if args.command == "list":
            asyncio.run(list_groups(store))
        else:
            pinned = args.command == "pin"
            asyncio.run(set_pinned(store, args.group_id, pinned, get_timezone(config)))
    except StoreError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
