# seed_catalog.py

from sqlmodel import Session

from app.core.seed import seed_catalog
from app.database import create_db_and_tables, engine


def main():
    print("Seeding catalog...")

    create_db_and_tables()
    with Session(engine) as session:
        inserted = seed_catalog(session)

    for table, count in inserted.items():
        print(f"  {table}: {count} row(s) inserted")

    print("Done. Tables that already had data were left untouched.")


if __name__ == "__main__":
    main()
