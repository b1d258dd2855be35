"""
Review import script
--------------------
Reads a JSONL file of reviews and stores them for one business through the
regular submission path, so the owner's plan quota applies.

Each line: {"customer_name": "...", "rating": 1-5, "comment": "...",
"is_published": false, "created_at": "2024-01-31T12:00:00"}
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from trustlet.core.config import get_settings
from trustlet.core.errors import BusinessNotFound, QuotaExceeded, TrustletError
from trustlet.db.session import create_engine_from_settings, make_session_factory
from trustlet.services.reviews import submit_review


def iter_jsonl(path: Path):
    """Yield one dict per non-empty, well-formed JSONL line."""
    with path.open("r", encoding="utf-8") as fp:
        for line in fp:
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError:
                continue


def parse_created_at(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def load_reviews(jsonl_path: Path, db: Session, business_id: int, free_limit: int) -> tuple[int, int, int]:
    """Import reviews; returns (success, skipped, failed) counts."""
    success = 0
    skipped = 0
    failed = 0

    for record in iter_jsonl(jsonl_path):
        try:
            review = submit_review(
                db,
                business_id,
                customer_name=record.get("customer_name"),
                rating=record.get("rating"),
                comment=record.get("comment", ""),
                free_limit=free_limit,
            )
        except BusinessNotFound:
            raise SystemExit(f"Business not found: {business_id}")
        except QuotaExceeded:
            print(f"[STOP] business_id={business_id} reached its plan limit", file=sys.stderr)
            break
        except TrustletError as exc:
            if exc.status_code >= 500:
                failed += 1
            else:
                skipped += 1
            if skipped + failed <= 5:
                print(f"[SKIP] {exc.message}: {record}", file=sys.stderr)
            continue

        review_id = review.id
        created_at = parse_created_at(record.get("created_at"))
        if created_at is not None or record.get("is_published"):
            if created_at is not None:
                review.created_at = created_at
            review.is_published = bool(record.get("is_published"))
            try:
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                failed += 1
                print(f"[FAIL] review {review_id} stored without created_at/is_published: {exc}", file=sys.stderr)
                continue
        success += 1
        if success % 10 == 0:
            print(f"[INFO] {success} reviews imported...", file=sys.stderr)

    return success, skipped, failed


def main() -> None:
    parser = argparse.ArgumentParser(description="Import reviews.jsonl for a business")
    parser.add_argument("--business-id", type=int, required=True, help="Target business id")
    parser.add_argument(
        "--file",
        type=Path,
        default=Path("reviews.jsonl"),
        help="Review JSONL path (default: ./reviews.jsonl)",
    )
    args = parser.parse_args()

    if not args.file.exists():
        raise SystemExit(f"File not found: {args.file}")

    settings = get_settings()
    session_factory = make_session_factory(create_engine_from_settings(settings))
    db = session_factory()
    try:
        print(f"Loading reviews from {args.file}...")
        success, skipped, failed = load_reviews(args.file, db, args.business_id, settings.free_plan_review_limit)

        print("\n" + "=" * 60)
        print("Review import finished")
        print("=" * 60)
        print(f"  imported: {success}")
        print(f"  skipped:  {skipped}")
        print(f"  failed:   {failed}")
        print("=" * 60)
    finally:
        db.close()


if __name__ == "__main__":
    main()
