from prometheus_client import Counter


ORDERS_DB_OPERATIONS_TOTAL = Counter(
    "order_store_orders_db_operations_total",
    "Orders DB operations",
    ["service", "operation", "status"],
)

CUSTOMERS_DB_OPERATIONS_TOTAL = Counter(
    "order_store_customers_db_operations_total",
    "Customers DB operations",
    ["service", "operation", "status"],
)

PRODUCTS_DB_OPERATIONS_TOTAL = Counter(
    "order_store_products_db_operations_total",
    "Products DB operations",
    ["service", "operation", "status"],
)
