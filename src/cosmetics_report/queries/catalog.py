from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence


@dataclass(frozen=True)
class QuerySpec:
    key: str
    title: str
    sql: str


INJECTION_BANNER = "SQL INJECTION DEMONSTRATIONS (for educational purposes)"


QUERIES: tuple[QuerySpec, ...] = (
    QuerySpec(
        "q1",
        "QUERY 1: All products with categories and brands (JOIN)",
        """
        SELECT p.product_name, c.category_name, b.brand_name, p.price, p.stock_quantity
        FROM products p
        JOIN categories c ON p.category_id = c.category_id
        JOIN brands b ON p.brand_id = b.brand_id
        ORDER BY p.price DESC;
        """,
    ),
    QuerySpec(
        "q2",
        "QUERY 2: Premium products (price > 2000) - WHERE clause",
        """
        SELECT product_name, price, stock_quantity
        FROM products
        WHERE price > 2000
        ORDER BY price DESC;
        """,
    ),
    QuerySpec(
        "q3",
        "QUERY 3: Products by category (COUNT + AVG + HAVING)",
        """
        SELECT c.category_name, COUNT(p.product_id) as product_count,
               ROUND(AVG(p.price)::NUMERIC, 2) as avg_price
        FROM categories c
        LEFT JOIN products p ON c.category_id = p.category_id
        GROUP BY c.category_id, c.category_name
        HAVING COUNT(p.product_id) > 0
        ORDER BY product_count DESC;
        """,
    ),
    QuerySpec(
        "q4",
        "QUERY 4: Products and stock by brand (GROUP BY + SUM)",
        """
        SELECT b.brand_name, COUNT(p.product_id) as products,
               SUM(p.stock_quantity) as total_stock
        FROM brands b
        LEFT JOIN products p ON b.brand_id = p.brand_id
        GROUP BY b.brand_id, b.brand_name
        HAVING COUNT(p.product_id) > 0
        ORDER BY products DESC;
        """,
    ),
    QuerySpec(
        "q5",
        "QUERY 5: Top rated products (AVG rating >= 4.0)",
        """
        SELECT p.product_name, ROUND(AVG(r.rating)::NUMERIC, 2) as avg_rating,
               COUNT(r.review_id) as review_count
        FROM products p
        INNER JOIN reviews r ON p.product_id = r.product_id
        GROUP BY p.product_id, p.product_name
        HAVING AVG(r.rating) >= 4.0
        ORDER BY avg_rating DESC;
        """,
    ),
    QuerySpec(
        "q6",
        "QUERY 6: Products expiring soon (within 6 months) - subquery logic",
        """
        SELECT product_name, expiration_date,
               expiration_date - CURRENT_DATE as days_left
        FROM products
        WHERE expiration_date < CURRENT_DATE + INTERVAL '6 months'
        ORDER BY expiration_date ASC;
        """,
    ),
    QuerySpec(
        "q7",
        "QUERY 7: Recent shipments with suppliers (INNER JOIN)",
        """
        SELECT p.product_name, su.supplier_name, sh.quantity,
               sh.cost, sh.shipment_date
        FROM shipments sh
        INNER JOIN products p ON sh.product_id = p.product_id
        INNER JOIN suppliers su ON sh.supplier_id = su.supplier_id
        ORDER BY sh.shipment_date DESC;
        """,
    ),
    QuerySpec(
        "q8",
        "QUERY 8: Top-5 bestsellers by revenue (SUM + LIMIT)",
        """
        SELECT p.product_name, SUM(s.quantity_sold) as total_sold,
               SUM(s.total_price) as revenue
        FROM products p
        LEFT JOIN sales s ON p.product_id = s.product_id
        WHERE s.sale_id IS NOT NULL
        GROUP BY p.product_id, p.product_name
        ORDER BY revenue DESC
        LIMIT 5;
        """,
    ),
    QuerySpec(
        "q9",
        "QUERY 9: Revenue by brand (multiple JOINs + SUM)",
        """
        SELECT b.brand_name, SUM(s.total_price) as total_revenue,
               COUNT(s.sale_id) as sales_count
        FROM brands b
        JOIN products p ON b.brand_id = p.brand_id
        JOIN sales s ON p.product_id = s.product_id
        GROUP BY b.brand_id, b.brand_name
        ORDER BY total_revenue DESC;
        """,
    ),
    QuerySpec(
        "q10",
        "QUERY 10: Database statistics (MIN, MAX, AVG, SUM)",
        """
        SELECT
            MIN(price) as cheapest,
            MAX(price) as most_expensive,
            ROUND(AVG(price)::NUMERIC, 2) as average_price,
            SUM(stock_quantity) as total_items
        FROM products;
        """,
    ),
)


# Deliberately unsanitized: each string is what naive concatenation of
# attacker input into a WHERE clause would produce.
INJECTIONS: tuple[QuerySpec, ...] = (
    QuerySpec(
        "inj1",
        "INJECTION 1: Boolean bypass (OR 1=1)",
        "SELECT product_name, price FROM products WHERE price > 0 OR 1=1;",
    ),
    QuerySpec(
        "inj2",
        "INJECTION 2: Subquery injection",
        "SELECT product_name FROM products WHERE price > 0 OR (SELECT COUNT(*) FROM brands) > 0;",
    ),
    QuerySpec(
        "inj3",
        "INJECTION 3: UNION attack",
        """
        SELECT product_name, CAST(price AS VARCHAR) as price
        FROM products
        UNION ALL
        SELECT brand_name, '9999' FROM brands;
        """,
    ),
)


def all_entries() -> List[QuerySpec]:
    return [*QUERIES, *INJECTIONS]


def select(keys: Iterable[str] | None = None) -> List[QuerySpec]:
    """Pick catalog entries by key, keeping catalog order."""
    entries = all_entries()
    if keys is None:
        return entries

    wanted = {k.strip().lower() for k in keys}
    known = {e.key for e in entries}
    unknown = sorted(wanted - known)
    if unknown:
        raise KeyError(f"Unknown query keys: {unknown}. Known: {[e.key for e in entries]}")

    return [e for e in entries if e.key in wanted]


def is_injection(spec: QuerySpec) -> bool:
    return spec.key.startswith("inj")


def split(entries: Sequence[QuerySpec]) -> tuple[List[QuerySpec], List[QuerySpec]]:
    queries = [e for e in entries if not is_injection(e)]
    injections = [e for e in entries if is_injection(e)]
    return queries, injections
