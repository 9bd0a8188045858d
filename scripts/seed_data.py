#!/usr/bin/env python3
"""Zapisz dane demonstracyjne (konta, kody promocyjne, rezerwacje)."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from smashfun.database import SessionLocal, init_db
from smashfun.seed import seed_demo_data


def main():
    init_db()
    db = SessionLocal()

    try:
        added = seed_demo_data(db)
    finally:
        db.close()

    print("Dodano:")
    print(f"  uzytkownicy: {added['users']}")
    print(f"  kody promocyjne: {added['promo_codes']}")
    print(f"  rezerwacje: {added['bookings']}")


if __name__ == "__main__":
    main()
