from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from bookcatalog.db import JsonFileStore  # noqa: E402
from bookcatalog.repositories.labels_repo import LabelsRepository  # noqa: E402


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Write the list of known labels into the labels file")
    parser.add_argument("labels", nargs="*", help="Label names to store")
    parser.add_argument("--input", help="Path to a JSON file holding an array of labels")
    parser.add_argument(
        "--db-label",
        default=os.getenv("DB_LABEL", str(ROOT_DIR / "db_label.json")),
        help="Labels file to write",
    )
    parser.add_argument("--append", action="store_true", help="Keep labels already in the file")
    parser.add_argument("--dry-run", action="store_true", help="Report without writing")
    return parser.parse_args(argv)


def collect_labels(args, existing: list[str]) -> list[str]:
    incoming = list(args.labels)
    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            raise SystemExit(f"Input file not found: {input_path}")
        with input_path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, list):
            raise SystemExit("Input file must contain a JSON array")
        incoming.extend(str(item) for item in raw)

    labels = list(existing) if args.append else []
    for label in incoming:
        label = label.strip()
        if label and label not in labels:
            labels.append(label)
    return labels


def main(argv=None):
    args = parse_args(argv)

    store = JsonFileStore(args.db_label)
    store.ensure_exists()
    repo = LabelsRepository(store)

    existing = repo.list_labels()
    if not isinstance(existing, list):
        existing = list(existing)

    labels = collect_labels(args, existing)
    if not labels:
        raise SystemExit("No labels given")

    if args.dry_run:
        print(f"Would write {len(labels)} labels to {store.path}: {', '.join(labels)}")
        return

    repo.replace_labels(labels)
    print(f"Wrote {len(labels)} labels to {store.path}")


if __name__ == "__main__":
    main()
