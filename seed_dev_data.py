"""Seed the development database with demo customers, invoices and revenue."""

from dashboard.backend.src.db import Base, get_engine, session_scope
from dashboard.backend.src.services.seed import seed_demo_data


def main() -> None:
    """Create tables (if needed) and load demo rows into empty tables."""

    engine = get_engine()
    Base.metadata.create_all(bind=engine)

    with session_scope() as session:
        result = seed_demo_data(session)

    print("Development data ready!")
    print(f"Customers created: {result.customers_created}")
    print(f"Invoices created: {result.invoices_created}")
    print(f"Revenue rows created: {result.revenue_created}")


if __name__ == "__main__":
    main()
