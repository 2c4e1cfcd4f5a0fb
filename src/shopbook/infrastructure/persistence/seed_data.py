"""First-run records returned when no data file exists yet."""

SEED_PRODUCTS = [
    {"id": "1", "name": "Laptop Pro X1", "sku": "LP-001", "price": 19200000, "stock": 15},
    {"id": "2", "name": "Wireless Mouse", "sku": "WM-002", "price": 400000, "stock": 50},
    {"id": "3", "name": "Mechanical Keyboard", "sku": "KB-003", "price": 1360000, "stock": 30},
    {"id": "4", "name": 'HD Monitor 24"', "sku": "MN-004", "price": 2400000, "stock": 8},
]

SEED_CUSTOMERS = [
    {
        "id": "1",
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "08123456789",
        "address": "123 Main St, Jakarta",
    },
    {
        "id": "2",
        "name": "Jane Smith",
        "email": "jane@enterprise.co",
        "phone": "08987654321",
        "address": "456 Tech Park, Bandung",
    },
]
